from datetime import date, datetime, time

from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_load


class Timestamp(fields.DateTime):
    """DateTime that also accepts a bare ``YYYY-MM-DD`` from a date input."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str) and len(value.strip()) == 10:
            try:
                return datetime.combine(date.fromisoformat(value.strip()), time.min)
            except ValueError as exc:
                raise ValidationError("Not a valid date.") from exc
        return super()._deserialize(value, attr, data, **kwargs)


class FormSchema(Schema):
    """Base for every entry schema, shared by dialog forms and the JSON API.

    Blank strings are dropped before validation so an untouched form input
    counts as "not provided" and field defaults apply.
    """

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def drop_blank_values(self, data, **kwargs):
        if not hasattr(data, "items"):
            return data
        return {
            key: value
            for key, value in data.items()
            if not (isinstance(value, str) and not value.strip())
        }


class PatchSchema(FormSchema):
    """Base for update schemas.

    A blank input for a nullable field clears it. Blanks for every other field
    are dropped, leaving the stored value as it was.
    """

    @pre_load
    def drop_blank_values(self, data, **kwargs):
        if not hasattr(data, "items"):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str) and not value.strip():
                field = self.fields.get(key)
                if field is None or not field.allow_none:
                    continue
                value = None
            cleaned[key] = value
        return cleaned
