from flask import Blueprint
from marshmallow import ValidationError
from werkzeug.exceptions import BadRequest, NotFound
from ...Storage.storage import get_storage
from ...Utils.Request import get_json_body
from ...Utils.Response import json_response, validation_error_response
from ...Utils.Schema import StatusSchema
from .userSchema import UserSchema

users_bp = Blueprint('users', __name__, url_prefix='/api/users')

user_schema = UserSchema()
users_schema = UserSchema(many=True)

@users_bp.route('', methods=['GET'])
def get_users():
    users = get_storage().get_users()
    return json_response(200, 'Users retrieved successfully', data=users_schema.dump(users))

@users_bp.route('', methods=['POST'])
def create_user():
    try:
        user_data = user_schema.load(get_json_body())
        user = get_storage().create_user(user_data)
        return json_response(201, 'User created successfully', data=user_schema.dump(user))

    except ValidationError as e:
        return validation_error_response(e)
    except BadRequest as e:
        return json_response(400, e.description, error={'body': e.description})

@users_bp.route('/<int:user_id>', methods=['GET'])
def get_user(user_id):
    try:
        user = get_storage().get_user(user_id)
        if not user:
            raise NotFound(description='User not found')
        return json_response(200, 'User retrieved successfully', data=user_schema.dump(user))

    except NotFound as e:
        return json_response(404, e.description, error={'user': 'Not found'})

@users_bp.route('/<int:user_id>', methods=['PATCH'])
def update_user_status(user_id):
    try:
        status = StatusSchema().load(get_json_body())['status']
        user = get_storage().update_user_status(user_id, status)
        if not user:
            raise NotFound(description='User not found')
        return json_response(200, 'User status updated successfully', data=user_schema.dump(user))

    except ValidationError as e:
        return validation_error_response(e)
    except BadRequest as e:
        return json_response(400, e.description, error={'body': e.description})
    except NotFound as e:
        return json_response(404, e.description, error={'user': 'Not found'})

@users_bp.route('/<int:user_id>', methods=['DELETE'])
def delete_user(user_id):
    get_storage().delete_user(user_id)
    return '', 204
