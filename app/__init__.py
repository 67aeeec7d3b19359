# app/__init__.py

import logging
import time
from datetime import datetime, timezone

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config
from .cli import register_commands
from db.extensions import db, migrate, check_database_health, init_limiter
from db.errors import AppError
from controllers.auth_controller import auth_bp
from controllers.booking_controller import booking_bp
from controllers.data_controller import data_bp
from controllers.event_controller import event_bp
from controllers.rooming_list_controller import rooming_list_bp

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'Referrer-Policy': 'no-referrer',
    'Strict-Transport-Security': 'max-age=15552000; includeSubDomains',
    'Cross-Origin-Opener-Policy': 'same-origin',
    'X-DNS-Prefetch-Control': 'off',
    'X-Permitted-Cross-Domain-Policies': 'none',
}


def create_app(config_object=Config):
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config_object)

    CORS(app,
         origins=[app.config['FRONTEND_URL']],
         methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'],
         allow_headers=['Content-Type', 'Authorization'],
         supports_credentials=True,
         max_age=3600
    )

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    init_limiter(app)

    # Register blueprints
    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(event_bp, url_prefix='/api')
    app.register_blueprint(booking_bp, url_prefix='/api')
    app.register_blueprint(rooming_list_bp, url_prefix='/api')
    app.register_blueprint(data_bp, url_prefix='/api')

    register_commands(app)

    # Configure logging
    debug_mode = app.config['DEBUG_MODE']
    log_level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app.logger.setLevel(log_level)

    if app.config['AUTO_CREATE_TABLES']:
        with app.app_context():
            db.create_all()
            app.logger.info("📊 Database tables ready")

    # Request timing middleware
    @app.before_request
    def before_request():
        request.start_time = time.time()
        if debug_mode:
            app.logger.debug(f"🚀 Started {request.method} {request.path}")

    @app.after_request
    def after_request(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)

        if hasattr(request, 'start_time'):
            elapsed = (time.time() - request.start_time) * 1000

            if elapsed > app.config['SLOW_REQUEST_MS']:
                app.logger.warning(
                    f"⚠️  SLOW REQUEST: {request.method} {request.path} "
                    f"took {elapsed:.2f}ms - Status: {response.status_code}"
                )
            elif debug_mode:
                app.logger.info(
                    f"✅ {request.method} {request.path} "
                    f"took {elapsed:.2f}ms - Status: {response.status_code}"
                )

        return response

    @app.errorhandler(AppError)
    def handle_app_error(e):
        if e.status_code >= 500:
            app.logger.error(f"❌ {type(e).__name__}: {e.message}", exc_info=True)
            message = e.message if debug_mode else 'Internal server error'
            return jsonify({'error': message}), e.status_code
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if e.code == 404:
            return jsonify({'error': 'Route not found'}), 404
        return jsonify({'error': e.description}), e.code

    # Global error handler
    @app.errorhandler(Exception)
    def handle_exception(e):
        app.logger.error(f"❌ Unhandled exception: {str(e)}", exc_info=True)
        message = str(e) if debug_mode else 'Internal server error'
        return jsonify({'error': message}), 500

    # Health check endpoint
    @app.route('/health', methods=['GET'])
    @app.route('/api/health', methods=['GET'])
    def health_check():
        """Health check endpoint for monitoring"""
        timestamp = datetime.now(timezone.utc).isoformat()
        if check_database_health():
            return jsonify({
                'status': 'OK',
                'message': 'Rooming List Manager API is running',
                'database': 'connected',
                'timestamp': timestamp
            }), 200
        return jsonify({
            'status': 'error',
            'message': 'Database unavailable',
            'database': 'disconnected',
            'timestamp': timestamp
        }), 503

    return app
