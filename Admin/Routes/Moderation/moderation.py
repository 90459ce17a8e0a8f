from flask import Blueprint
from marshmallow import ValidationError
from werkzeug.exceptions import BadRequest, NotFound
from ...Storage.storage import get_storage
from ...Utils.Request import get_json_body
from ...Utils.Response import json_response, validation_error_response
from ...Utils.Schema import StatusSchema
from .moderationSchema import ReviewSchema, PhotoSchema

moderation_bp = Blueprint('moderation', __name__, url_prefix='/api/moderation')

PENDING = 'pending'

def pending_only(rows):
    return [row for row in rows if row.status == PENDING]

@moderation_bp.route('/reviews', methods=['GET'])
def get_pending_reviews():
    reviews = pending_only(get_storage().get_reviews())
    return json_response(200, 'Pending reviews retrieved successfully', data=ReviewSchema(many=True).dump(reviews))

@moderation_bp.route('/reviews/<int:review_id>', methods=['PATCH'])
def moderate_review(review_id):
    try:
        status = StatusSchema().load(get_json_body())['status']
        review = get_storage().update_review_status(review_id, status)
        if not review:
            raise NotFound(description='Review not found')
        return json_response(200, 'Review status updated successfully', data=ReviewSchema().dump(review))

    except ValidationError as e:
        return validation_error_response(e)
    except BadRequest as e:
        return json_response(400, e.description, error={'body': e.description})
    except NotFound as e:
        return json_response(404, e.description, error={'review': 'Not found'})

@moderation_bp.route('/photos', methods=['GET'])
def get_pending_photos():
    photos = pending_only(get_storage().get_photos())
    return json_response(200, 'Pending photos retrieved successfully', data=PhotoSchema(many=True).dump(photos))

@moderation_bp.route('/photos/<int:photo_id>', methods=['PATCH'])
def moderate_photo(photo_id):
    try:
        status = StatusSchema().load(get_json_body())['status']
        photo = get_storage().update_photo_status(photo_id, status)
        if not photo:
            raise NotFound(description='Photo not found')
        return json_response(200, 'Photo status updated successfully', data=PhotoSchema().dump(photo))

    except ValidationError as e:
        return validation_error_response(e)
    except BadRequest as e:
        return json_response(400, e.description, error={'body': e.description})
    except NotFound as e:
        return json_response(404, e.description, error={'photo': 'Not found'})
