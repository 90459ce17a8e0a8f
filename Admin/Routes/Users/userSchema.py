from marshmallow import fields, validate
from ...Utils.Schema import BaseSchema

class UserSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    email = fields.Email(allow_none=True)
    role = fields.Str(validate=validate.Length(min=1, max=50))
    status = fields.Str(validate=validate.Length(min=1, max=50))
    joined_at = fields.DateTime(data_key='joinedAt', dump_only=True)
