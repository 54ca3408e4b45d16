from leaguehub.schemas import (
    CreateCitySchema,
    CreateLeagueSchema,
    CreateSportSchema,
    UpdateCitySchema,
    UpdateLeagueSchema,
    UpdateSportSchema,
)


class Resource:
    """How one remote table is listed and edited from the admin dashboard."""

    def __init__(self, table, label, create_schema, update_schema, relations=()):
        self.table = table
        self.label = label
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.relations = relations
        # Newest first everywhere, so a prepended record keeps the order
        self.order_by = ("created_at", "desc")

    def __repr__(self):
        return f"<Resource {self.table}>"


CITIES = Resource("cities", "city", CreateCitySchema, UpdateCitySchema)
SPORTS = Resource("sports", "sport", CreateSportSchema, UpdateSportSchema)
LEAGUES = Resource(
    "leagues",
    "league",
    CreateLeagueSchema,
    UpdateLeagueSchema,
    relations=("city", "sport"),
)

RESOURCES = {resource.table: resource for resource in (CITIES, SPORTS, LEAGUES)}
