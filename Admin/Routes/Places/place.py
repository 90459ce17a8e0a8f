from flask import Blueprint
from marshmallow import ValidationError
from werkzeug.exceptions import BadRequest, NotFound
from ...Storage.storage import get_storage
from ...Utils.Request import get_json_body
from ...Utils.Response import json_response, validation_error_response
from ...Utils.preprocess.preprocess import preprocess_place_body
from .placeSchema import PlaceSchema

places_bp = Blueprint('places', __name__, url_prefix='/api/places')

@places_bp.route('', methods=['GET'])
def get_places():
    places = get_storage().get_places()
    schema = PlaceSchema(many=True)
    return json_response(200, 'Places retrieved successfully', data=schema.dump(places))

@places_bp.route('', methods=['POST'])
def create_place():
    try:
        data = preprocess_place_body(get_json_body())
        schema = PlaceSchema()
        place_data = schema.load(data)
        place = get_storage().create_place(place_data)
        return json_response(201, 'Place created successfully', data=schema.dump(place))

    except ValidationError as e:
        return validation_error_response(e)
    except BadRequest as e:
        return json_response(400, e.description, error={'body': e.description})

@places_bp.route('/<int:place_id>', methods=['GET'])
def get_place(place_id):
    try:
        place = get_storage().get_place(place_id)
        if not place:
            raise NotFound(description='Place not found')
        return json_response(200, 'Place retrieved successfully', data=PlaceSchema().dump(place))

    except NotFound as e:
        return json_response(404, e.description, error={'place': 'Not found'})

@places_bp.route('/<int:place_id>', methods=['PUT'])
def update_place(place_id):
    try:
        data = preprocess_place_body(get_json_body())
        schema = PlaceSchema()
        place_data = schema.load(data, partial=True)
        place = get_storage().update_place(place_id, place_data)
        if not place:
            raise NotFound(description='Place not found')
        return json_response(200, 'Place updated successfully', data=schema.dump(place))

    except ValidationError as e:
        return validation_error_response(e)
    except BadRequest as e:
        return json_response(400, e.description, error={'body': e.description})
    except NotFound as e:
        return json_response(404, e.description, error={'place': 'Not found'})

@places_bp.route('/<int:place_id>', methods=['DELETE'])
def delete_place(place_id):
    get_storage().delete_place(place_id)
    return '', 204
