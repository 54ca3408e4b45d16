from leaguehub.extensions import ma
from leaguehub.models.league import (
    DEFAULT_LEAGUE_IMAGE,
    League,
    LeagueStatus,
    normalize_status,
)
from leaguehub.schemas.base import FormSchema, PatchSchema, Timestamp
from marshmallow import fields, post_load, pre_load, validate

STATUSES = [status.value for status in LeagueStatus]


class LeagueSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = League
        load_instance = True
        include_fk = True

    city = ma.Nested("CitySchema", only=("id", "name"), dump_only=True)
    sport = ma.Nested("SportSchema", only=("id", "name"), dump_only=True)


class _LeagueFormSchema(FormSchema):
    @pre_load
    def normalize_status(self, data, **kwargs):
        if hasattr(data, "items") and "status" in data:
            data = dict(data)
            data["status"] = normalize_status(data["status"])
        return data


class CreateLeagueSchema(_LeagueFormSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    city_id = fields.Integer(required=True)
    sport_id = fields.Integer(required=True)
    max_teams = fields.Integer(required=True, validate=validate.Range(min=2))
    start_date = Timestamp(required=True)
    end_date = Timestamp(required=True)
    registration_deadline = Timestamp(required=True)
    status = fields.String(
        load_default=LeagueStatus.UPCOMING.value, validate=validate.OneOf(STATUSES)
    )
    image = fields.Url(load_default=DEFAULT_LEAGUE_IMAGE)


class UpdateLeagueSchema(_LeagueFormSchema, PatchSchema):
    name = fields.String(validate=validate.Length(min=1, max=200))
    city_id = fields.Integer()
    sport_id = fields.Integer()
    max_teams = fields.Integer(validate=validate.Range(min=2))
    start_date = Timestamp()
    end_date = Timestamp()
    registration_deadline = Timestamp()
    status = fields.String(validate=validate.OneOf(STATUSES))
    image = fields.Url(allow_none=True)

    @post_load
    def restore_default_image(self, data, **kwargs):
        if "image" in data and data["image"] is None:
            data["image"] = DEFAULT_LEAGUE_IMAGE
        return data
