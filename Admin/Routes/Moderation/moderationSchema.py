from marshmallow import fields, validate
from ...Utils.Schema import BaseSchema

class ReviewSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    user_id = fields.Int(data_key='userId', allow_none=True)
    user_name = fields.Str(data_key='userName', allow_none=True)
    place_id = fields.Int(data_key='placeId', allow_none=True)
    place_name = fields.Str(data_key='placeName', allow_none=True)
    content = fields.Str(required=True, validate=validate.Length(min=1))
    rating = fields.Str(allow_none=True, validate=validate.Length(max=10))
    status = fields.Str(validate=validate.Length(min=1, max=50))
    created_at = fields.DateTime(data_key='createdAt', dump_only=True)

class PhotoSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    uploader_id = fields.Int(data_key='uploaderId', allow_none=True)
    uploader_name = fields.Str(data_key='uploaderName', allow_none=True)
    url = fields.Str(required=True, validate=validate.Length(min=1))
    caption = fields.Str(allow_none=True)
    related_type = fields.Str(data_key='relatedType', allow_none=True)
    related_id = fields.Int(data_key='relatedId', allow_none=True)
    status = fields.Str(validate=validate.Length(min=1, max=50))
    created_at = fields.DateTime(data_key='createdAt', dump_only=True)
