from leaguehub.extensions import ma
from leaguehub.models.sport import Sport
from leaguehub.schemas.base import FormSchema, PatchSchema
from marshmallow import fields, validate


class SportSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Sport
        load_instance = True


class CreateSportSchema(FormSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    description = fields.String(load_default=None)
    players_per_team = fields.Integer(required=True, validate=validate.Range(min=1))


class UpdateSportSchema(PatchSchema):
    name = fields.String(validate=validate.Length(min=1, max=100))
    description = fields.String(allow_none=True)
    players_per_team = fields.Integer(validate=validate.Range(min=1))
