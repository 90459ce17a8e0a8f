from marshmallow import Schema, fields, validate, EXCLUDE


class BaseSchema(Schema):
    class Meta:
        # Drop read-only and unrecognised keys instead of rejecting the body
        unknown = EXCLUDE


class StatusSchema(BaseSchema):
    status = fields.Str(required=True, validate=validate.Length(min=1, max=50))
