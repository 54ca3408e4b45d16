from leaguehub.models.league import LeagueStatus, normalize_status
from leaguehub.services.admin_shell import filter_by_name


def _city_name(league):
    return (league.get("city") or {}).get("name")


def list_leagues(gateway, status=None, city=None):
    """Leagues with their city and sport names, soonest start first."""
    leagues = gateway.select(
        "leagues", relations=("city", "sport"), order_by=("start_date", "asc")
    )
    leagues = filter_by_name(leagues, city, key=_city_name)
    if status:
        status = normalize_status(status)
        leagues = [league for league in leagues if normalize_status(league["status"]) == status]
    return leagues


def leagues_by_status(gateway, city=None):
    groups = {status.value: [] for status in LeagueStatus}
    for league in list_leagues(gateway, city=city):
        groups.setdefault(normalize_status(league["status"]), []).append(league)
    return groups
