import pytest
from marshmallow import ValidationError

from leaguehub.services.resources import CITIES, LEAGUES, SPORTS
from leaguehub.services.view_model import EntityViewModel, SyncPolicy

AUSTIN = {"name": "Austin", "state": "TX", "country": "USA"}


def _cities(*names):
    return [
        {"id": i, "name": name, "state": None, "country": None, "created_at": "2026-01-01"}
        for i, name in enumerate(names, start=1)
    ]


def test_refresh_replaces_items_in_order(fake_gateway):
    rows = _cities("Miami", "Chicago", "Los Angeles")
    view_model = EntityViewModel(CITIES, fake_gateway({"cities": rows}))
    view_model.items = [{"id": 99, "name": "Stale"}]

    assert view_model.refresh() is True
    assert view_model.items == rows
    assert view_model.loading is False


def test_refresh_failure_keeps_items(fake_gateway):
    view_model = EntityViewModel(CITIES, fake_gateway(fail={"select"}))
    view_model.items = _cities("Miami")

    assert view_model.refresh() is False
    assert view_model.items == _cities("Miami")
    assert view_model.loading is False
    assert "select failed" in str(view_model.last_error)


def test_refresh_failure_does_not_alert(fake_gateway):
    alerts = []
    view_model = EntityViewModel(CITIES, fake_gateway(fail={"select"}), alert=alerts.append)
    view_model.refresh()
    assert alerts == []


def test_create_prepends_server_record(fake_gateway):
    gateway = fake_gateway({"cities": _cities("Miami")}, next_id=42)
    view_model = EntityViewModel(CITIES, gateway)
    view_model.refresh()

    assert view_model.create(AUSTIN) is True
    assert len(view_model.items) == 2
    created = view_model.items[0]
    assert created["id"] == 42
    assert created["name"] == "Austin"
    assert created["created_at"] == "2026-10-19T10:00:00"
    assert view_model.last_record == created


def test_create_austin_has_no_duplicate_ids(fake_gateway):
    gateway = fake_gateway(next_id=42)
    view_model = EntityViewModel(CITIES, gateway)
    # A refresh that already picked up the new row must not lead to a duplicate
    view_model.items = [{"id": 42, **AUSTIN, "created_at": "2026-10-19T10:00:00"}]

    assert view_model.create(AUSTIN) is True
    assert [item["id"] for item in view_model.items] == [42]
    assert view_model.items[0] == {"id": 42, **AUSTIN, "created_at": "2026-10-19T10:00:00"}


def test_create_failure_leaves_items_and_alerts(fake_gateway):
    alerts = []
    view_model = EntityViewModel(CITIES, fake_gateway(fail={"insert"}), alert=alerts.append)
    view_model.items = _cities("Miami")

    assert view_model.create(AUSTIN) is False
    assert view_model.items == _cities("Miami")
    assert alerts == ["Error adding city"]
    assert view_model.last_record is None


def test_create_validates_before_calling_gateway(fake_gateway):
    gateway = fake_gateway()
    view_model = EntityViewModel(CITIES, gateway)

    with pytest.raises(ValidationError) as exc:
        view_model.create({"name": "", "state": "TX"})

    assert "name" in exc.value.messages
    assert gateway.calls == []
    assert view_model.items == []


def test_create_coerces_players_per_team(fake_gateway):
    view_model = EntityViewModel(SPORTS, fake_gateway())
    view_model.create({"name": "Soccer", "players_per_team": "11"})
    assert view_model.items[0]["players_per_team"] == 11


def test_create_league_applies_defaults(fake_gateway):
    view_model = EntityViewModel(LEAGUES, fake_gateway())
    view_model.create(
        {
            "name": "Summer Soccer Championship",
            "city_id": "1",
            "sport_id": "1",
            "max_teams": "16",
            "start_date": "2026-07-15",
            "end_date": "2026-09-15",
            "registration_deadline": "2026-07-01",
            "image": "",
        }
    )
    created = view_model.items[0]
    assert created["status"] == "upcoming"
    assert created["image"] == "https://i.imgur.com/rq0aY15.png"
    assert created["max_teams"] == 16


def test_patch_replaces_matching_item(fake_gateway):
    rows = _cities("Miami", "Chicago")
    view_model = EntityViewModel(CITIES, fake_gateway({"cities": rows}))
    view_model.refresh()

    assert view_model.patch(2, {"state": "IL"}) is True
    assert view_model.find(2)["state"] == "IL"
    assert view_model.find(1)["state"] is None


def test_patch_failure_leaves_items(fake_gateway):
    alerts = []
    gateway = fake_gateway({"cities": _cities("Miami")}, fail={"update"})
    view_model = EntityViewModel(CITIES, gateway, alert=alerts.append)
    view_model.refresh()

    assert view_model.patch(1, {"name": "Orlando"}) is False
    assert view_model.find(1)["name"] == "Miami"
    assert alerts == ["Error updating city"]


def test_remove_after_confirmed_delete(fake_gateway):
    view_model = EntityViewModel(CITIES, fake_gateway({"cities": _cities("Miami", "Chicago")}))
    view_model.refresh()

    assert view_model.remove(1) is True
    assert [item["id"] for item in view_model.items] == [2]


def test_remove_keeps_item_when_delete_fails(fake_gateway):
    alerts = []
    gateway = fake_gateway({"cities": _cities("Miami")}, fail={"delete"})
    view_model = EntityViewModel(CITIES, gateway, alert=alerts.append)
    view_model.refresh()

    assert view_model.remove(1) is False
    assert view_model.find(1) is not None
    assert alerts == ["Error deleting city"]


def test_remove_missing_record_keeps_items(fake_gateway):
    view_model = EntityViewModel(CITIES, fake_gateway({"cities": _cities("Miami")}))
    view_model.refresh()

    assert view_model.remove(7) is False
    assert len(view_model.items) == 1


def test_refetch_policy_reloads_after_write(fake_gateway):
    gateway = fake_gateway({"cities": _cities("Miami")}, next_id=5)
    view_model = EntityViewModel(CITIES, gateway, policy=SyncPolicy.REFETCH)
    view_model.refresh()

    assert view_model.create(AUSTIN) is True
    assert view_model.items == gateway.rows["cities"]
    assert gateway.calls[-1] == ("select", "cities")


def test_policy_accepts_config_string(fake_gateway):
    view_model = EntityViewModel(CITIES, fake_gateway(), policy="refetch")
    assert view_model.policy is SyncPolicy.REFETCH
