from marshmallow import fields, validate
from ...Utils.Schema import BaseSchema

class PlaylistSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    description = fields.Str(allow_none=True)
    creator_id = fields.Int(data_key='creatorId', allow_none=True)
    creator_name = fields.Str(data_key='creatorName', allow_none=True)
    status = fields.Str(validate=validate.Length(min=1, max=50))
    places_count = fields.Int(data_key='placesCount', validate=validate.Range(min=0))
    is_featured = fields.Bool(data_key='isFeatured')
    visibility = fields.Str(validate=validate.Length(min=1, max=50))
    created_at = fields.DateTime(data_key='createdAt', dump_only=True)
