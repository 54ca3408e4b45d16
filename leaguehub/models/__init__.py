from leaguehub.models.city import City
from leaguehub.models.sport import Sport
from leaguehub.models.league import League, LeagueStatus
from leaguehub.models.user import User

__all__ = [
    "City",
    "Sport",
    "League",
    "LeagueStatus",
    "User",
]
