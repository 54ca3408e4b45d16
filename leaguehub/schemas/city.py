from leaguehub.extensions import ma
from leaguehub.models.city import City
from leaguehub.schemas.base import FormSchema, PatchSchema
from marshmallow import fields, validate


class CitySchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = City
        load_instance = True


class CreateCitySchema(FormSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    state = fields.String(load_default=None, validate=validate.Length(max=100))
    country = fields.String(load_default=None, validate=validate.Length(max=100))


class UpdateCitySchema(PatchSchema):
    name = fields.String(validate=validate.Length(min=1, max=100))
    state = fields.String(allow_none=True, validate=validate.Length(max=100))
    country = fields.String(allow_none=True, validate=validate.Length(max=100))
