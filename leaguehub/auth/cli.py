import click
from flask.cli import AppGroup
from leaguehub.auth.gate import ADMIN_ROLE
from leaguehub.extensions import db
from leaguehub.models.user import User

users_cli = AppGroup("users", help="Manage user roles.")


def _get_user(email):
    user = User.query.filter_by(email=email).first()
    if not user:
        raise click.ClickException(f"No user with email {email}")
    return user


@users_cli.command("grant-admin")
@click.argument("email")
def grant_admin(email):
    """Give EMAIL the admin role."""
    user = _get_user(email)
    user.set_role(ADMIN_ROLE)
    db.session.commit()
    click.echo(f"{email} is now an admin.")


@users_cli.command("revoke-admin")
@click.argument("email")
def revoke_admin(email):
    """Remove the admin role from EMAIL."""
    user = _get_user(email)
    user.set_role(None)
    db.session.commit()
    click.echo(f"{email} is no longer an admin.")
