# FILE: forum/commands.py
"""
Management commands:

    flask --app forum init-db
    flask --app forum create-user NAME EMAIL PASSWORD
"""
import click
from flask.cli import with_appcontext

from forum.extensions import db
from forum.services import user_mgmt_service
from forum.services.user_mgmt_service import ServiceError


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables."""
    db.create_all()
    click.echo("Database initialized.")


@click.command("create-user")
@click.argument("name")
@click.argument("email")
@click.argument("password")
@with_appcontext
def create_user_command(name, email, password):
    """Create a user."""
    try:
        user = user_mgmt_service.create_user(name, email, password)
    except ServiceError as e:
        raise click.ClickException(str(e))
    click.echo(f"Created user {user.name} (id={user.id}).")
