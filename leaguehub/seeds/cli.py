import click
from flask.cli import AppGroup
from leaguehub.auth.gate import ADMIN_ROLE
from leaguehub.extensions import db
from leaguehub.models.city import City
from leaguehub.models.league import DEFAULT_LEAGUE_IMAGE, League
from leaguehub.models.sport import Sport
from leaguehub.models.user import User
from leaguehub.seeds.data import CITIES, DEFAULT_ADMIN, LEAGUES, SPORTS

seed_cli = AppGroup("seed", help="Seed database commands.")


def seed_city_rows():
    created = 0
    for name, state, country in CITIES:
        if not City.query.filter_by(name=name).first():
            db.session.add(City(name=name, state=state, country=country))
            created += 1
    db.session.commit()
    return created


def seed_sport_rows():
    created = 0
    for name, description, players_per_team in SPORTS:
        if not Sport.query.filter_by(name=name).first():
            db.session.add(
                Sport(name=name, description=description, players_per_team=players_per_team)
            )
            created += 1
    db.session.commit()
    return created


def seed_league_rows():
    """Create the sample leagues. Cities and sports must exist already."""
    created = 0
    for name, city_name, sport_name, max_teams, deadline, start, end, status in LEAGUES:
        if League.query.filter_by(name=name).first():
            continue

        city = City.query.filter_by(name=city_name).first()
        sport = Sport.query.filter_by(name=sport_name).first()
        if not city or not sport:
            click.echo(f"Skipping {name}: seed cities and sports first.")
            continue

        db.session.add(
            League(
                name=name,
                city_id=city.id,
                sport_id=sport.id,
                max_teams=max_teams,
                registration_deadline=deadline,
                start_date=start,
                end_date=end,
                status=status,
                image=DEFAULT_LEAGUE_IMAGE,
            )
        )
        created += 1
    db.session.commit()
    return created


def seed_admin_user():
    user = User.query.filter_by(email=DEFAULT_ADMIN["email"]).first()
    if user:
        return False

    user = User(
        email=DEFAULT_ADMIN["email"],
        first_name=DEFAULT_ADMIN["first_name"],
        last_name=DEFAULT_ADMIN["last_name"],
        public_metadata={"role": ADMIN_ROLE},
    )
    user.set_password(DEFAULT_ADMIN["password"])
    db.session.add(user)
    db.session.commit()
    return True


@seed_cli.command("cities")
def seed_cities():
    """Seed cities."""
    click.echo(f"Seeded {seed_city_rows()} cities.")


@seed_cli.command("sports")
def seed_sports():
    """Seed sports."""
    click.echo(f"Seeded {seed_sport_rows()} sports.")


@seed_cli.command("leagues")
def seed_leagues():
    """Seed sample leagues."""
    click.echo(f"Seeded {seed_league_rows()} leagues.")


@seed_cli.command("admin")
def seed_admin():
    """Seed default admin user."""
    if seed_admin_user():
        click.echo(f"Created admin user: {DEFAULT_ADMIN['email']}")
    else:
        click.echo("Admin user already exists.")


@seed_cli.command("all")
def seed_all():
    """Seed all data."""
    click.echo(f"Seeded {seed_city_rows()} cities.")
    click.echo(f"Seeded {seed_sport_rows()} sports.")
    click.echo(f"Seeded {seed_league_rows()} leagues.")
    if seed_admin_user():
        click.echo(f"Created admin user: {DEFAULT_ADMIN['email']}")
    else:
        click.echo("Admin user already exists.")
    click.echo("All seed data loaded successfully!")
