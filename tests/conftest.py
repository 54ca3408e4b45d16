import os
from datetime import datetime

import pytest

os.environ["FLASK_ENV"] = "testing"

from leaguehub import create_app
from leaguehub.errors import RecordNotFound, RemoteError
from leaguehub.extensions import db as _db
from leaguehub.models.city import City
from leaguehub.models.league import League
from leaguehub.models.sport import Sport
from leaguehub.models.user import User


@pytest.fixture(scope="session")
def app():
    app = create_app("testing")
    yield app


@pytest.fixture(autouse=True)
def tables(app):
    """Create all tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, email, password):
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    token = resp.get_json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(app):
    user = User(
        email="testadmin@leaguehub.local",
        first_name="Test",
        last_name="Admin",
        public_metadata={"role": "admin"},
    )
    user.set_password("Admin@2026")
    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture
def admin_headers(client, admin_user):
    return _login(client, "testadmin@leaguehub.local", "Admin@2026")


@pytest.fixture
def member_user(app):
    user = User(
        email="member@leaguehub.local",
        first_name="Test",
        last_name="Member",
        public_metadata={},
    )
    user.set_password("Member@2026")
    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture
def member_headers(client, member_user):
    return _login(client, "member@leaguehub.local", "Member@2026")


@pytest.fixture
def city(app):
    city = City(name="Chicago", state="IL", country="USA")
    _db.session.add(city)
    _db.session.commit()
    return city


@pytest.fixture
def sport(app):
    sport = Sport(name="Basketball", description="Five-a-side", players_per_team=5)
    _db.session.add(sport)
    _db.session.commit()
    return sport


@pytest.fixture
def league(app, city, sport):
    league = League(
        name="Fall Basketball Tournament",
        city_id=city.id,
        sport_id=sport.id,
        max_teams=32,
        registration_deadline=datetime(2026, 8, 15),
        start_date=datetime(2026, 9, 1),
        end_date=datetime(2026, 11, 30),
        status="upcoming",
        image="https://i.imgur.com/rq0aY15.png",
    )
    _db.session.add(league)
    _db.session.commit()
    return league


class FakeGateway:
    """In-memory stand-in for ``DataGateway`` with switchable failures."""

    def __init__(self, rows=None, fail=(), next_id=1):
        self.rows = {table: list(items) for table, items in (rows or {}).items()}
        self.fail = set(fail)
        self.next_id = next_id
        self.calls = []

    def _check(self, operation, table):
        self.calls.append((operation, table))
        if operation in self.fail:
            raise RemoteError(f"{operation} failed", table=table)

    def select(self, table, columns="*", relations=(), order_by=None, filters=None):
        self._check("select", table)
        return [dict(row) for row in self.rows.get(table, [])]

    def insert(self, table, record, relations=()):
        self._check("insert", table)
        created = {"id": self.next_id, **record, "created_at": "2026-10-19T10:00:00"}
        self.next_id += 1
        self.rows.setdefault(table, []).insert(0, created)
        return dict(created)

    def update(self, table, record_id, patch, relations=()):
        self._check("update", table)
        for row in self.rows.get(table, []):
            if row["id"] == record_id:
                row.update(patch)
                return dict(row)
        raise RecordNotFound(f"No {table} row with id {record_id}", table=table)

    def delete(self, table, record_id):
        self._check("delete", table)
        rows = self.rows.get(table, [])
        if not any(row["id"] == record_id for row in rows):
            raise RecordNotFound(f"No {table} row with id {record_id}", table=table)
        self.rows[table] = [row for row in rows if row["id"] != record_id]
        return True


@pytest.fixture
def fake_gateway():
    return FakeGateway
