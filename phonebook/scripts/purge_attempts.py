"""CLI command for removing expired verification attempts.

Usage:
    flask purge-attempts
"""

from __future__ import annotations

import click
from flask.cli import with_appcontext


@click.command("purge-attempts")
@with_appcontext
def purge_attempts_command():
    """Delete verification attempts whose code window has closed."""
    from phonebook.core.auth.verification_service import purge_expired_attempts

    removed = purge_expired_attempts()
    click.echo(f"Removed {removed} expired verification attempts")


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(purge_attempts_command)
