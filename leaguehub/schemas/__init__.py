from leaguehub.schemas.city import CitySchema, CreateCitySchema, UpdateCitySchema
from leaguehub.schemas.sport import SportSchema, CreateSportSchema, UpdateSportSchema
from leaguehub.schemas.league import LeagueSchema, CreateLeagueSchema, UpdateLeagueSchema
from leaguehub.schemas.user import UserSchema, SignUpSchema

__all__ = [
    "CitySchema",
    "CreateCitySchema",
    "UpdateCitySchema",
    "SportSchema",
    "CreateSportSchema",
    "UpdateSportSchema",
    "LeagueSchema",
    "CreateLeagueSchema",
    "UpdateLeagueSchema",
    "UserSchema",
    "SignUpSchema",
]
