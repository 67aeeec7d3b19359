# controllers/data_controller.py

from flask import Blueprint, jsonify

from controllers.common import require_auth, success
from db.gateway import get_gateway
from services.data_service import (
    BOOKINGS_FILE,
    ROOMING_LIST_BOOKINGS_FILE,
    ROOMING_LISTS_FILE,
    DataService,
)

data_bp = Blueprint('data', __name__)
data_bp.before_request(require_auth)


def data_service():
    return DataService(get_gateway())


@data_bp.route('/data/status', methods=['GET'])
def get_status():
    return success(data_service().get_status())


@data_bp.route('/data/insert', methods=['POST'])
@data_bp.route('/data/insert-sample-data', methods=['POST'])
def insert_sample_data():
    summary = data_service().insert_sample_data()
    return success(
        summary,
        message='Data inserted successfully from JSON files',
        files={
            'roomingLists': ROOMING_LISTS_FILE,
            'bookings': BOOKINGS_FILE,
            'relationships': ROOMING_LIST_BOOKINGS_FILE,
        }
    )


@data_bp.route('/data/clear', methods=['DELETE'])
@data_bp.route('/data/clear-all', methods=['DELETE'])
def clear_data():
    data_service().clear_all_data()
    return jsonify({
        'status': 'success',
        'message': 'All data cleared successfully'
    }), 200
