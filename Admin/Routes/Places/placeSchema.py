from marshmallow import fields, validate, validates, ValidationError
import json
from ...Utils.Schema import BaseSchema

class PlaceSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    description = fields.Str(required=True)
    location = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    category = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    image_url = fields.Str(data_key='imageUrl', allow_none=True)
    rating = fields.Str(allow_none=True, validate=validate.Length(max=10))
    status = fields.Str(validate=validate.Length(min=1, max=50))
    amenities = fields.Str(allow_none=True)
    coordinates = fields.Str(allow_none=True)
    created_at = fields.DateTime(data_key='createdAt', dump_only=True)

    @validates('amenities')
    def validate_amenities(self, value, **kwargs):
        if value is None:
            return
        try:
            decoded = json.loads(value)
        except ValueError:
            raise ValidationError('Amenities must be a JSON-encoded list')
        if not isinstance(decoded, list):
            raise ValidationError('Amenities must be a JSON-encoded list')

    @validates('coordinates')
    def validate_coordinates(self, value, **kwargs):
        if value is None:
            return
        try:
            decoded = json.loads(value)
        except ValueError:
            raise ValidationError('Coordinates must be a JSON-encoded object or list')
        if not isinstance(decoded, (dict, list)):
            raise ValidationError('Coordinates must be a JSON-encoded object or list')
