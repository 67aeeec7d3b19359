# app/cli.py

import click
from flask.cli import AppGroup, with_appcontext

from db.gateway import get_gateway
from services.auth_service import AuthService
from services.data_service import DataService
from services.errors import AppError

data_cli = AppGroup('data', help='Load, clear and inspect rooming list data.')


@data_cli.command('insert')
@click.option('--directory', default=None, help='Directory holding the sample JSON files.')
def insert_data(directory):
    """Replace all data with the JSON sample set."""
    try:
        summary = DataService(get_gateway()).insert_sample_data(directory)
    except AppError as e:
        raise click.ClickException(e.message)
    click.echo(f"Sample data inserted: {summary}")


@data_cli.command('clear')
def clear_data():
    """Delete every event, booking, rooming list and link."""
    try:
        deleted = DataService(get_gateway()).clear_all_data()
    except AppError as e:
        raise click.ClickException(e.message)
    click.echo(f"All data cleared: {deleted}")


@data_cli.command('status')
def data_status():
    """Print row counts per table."""
    for name, count in DataService(get_gateway()).get_status().items():
        click.echo(f"{name}: {count}")


@click.command('create-user')
@click.argument('username')
@click.argument('email')
@click.argument('password')
@with_appcontext
def create_user(username, email, password):
    """Register a user from the command line."""
    try:
        result = AuthService(get_gateway()).register(username, email, password)
    except AppError as e:
        raise click.ClickException(e.message)
    click.echo(f"User '{result['user']['username']}' created with id {result['user']['id']}")


def register_commands(app):
    app.cli.add_command(data_cli)
    app.cli.add_command(create_user)
