from flask import Blueprint
from marshmallow import ValidationError
from werkzeug.exceptions import BadRequest, NotFound
from ...Storage.storage import get_storage
from ...Utils.Request import get_json_body
from ...Utils.Response import json_response, validation_error_response
from ...Utils.Schema import StatusSchema
from .playlistSchema import PlaylistSchema

playlists_bp = Blueprint('playlists', __name__, url_prefix='/api/playlists')

@playlists_bp.route('', methods=['GET'])
def get_playlists():
    playlists = get_storage().get_playlists()
    return json_response(200, 'Playlists retrieved successfully', data=PlaylistSchema(many=True).dump(playlists))

@playlists_bp.route('', methods=['POST'])
def create_playlist():
    try:
        schema = PlaylistSchema()
        playlist_data = schema.load(get_json_body())
        playlist = get_storage().create_playlist(playlist_data)
        return json_response(201, 'Playlist created successfully', data=schema.dump(playlist))

    except ValidationError as e:
        return validation_error_response(e)
    except BadRequest as e:
        return json_response(400, e.description, error={'body': e.description})

@playlists_bp.route('/<int:playlist_id>', methods=['PATCH'])
def update_playlist_status(playlist_id):
    try:
        status = StatusSchema().load(get_json_body())['status']
        playlist = get_storage().update_playlist_status(playlist_id, status)
        if not playlist:
            raise NotFound(description='Playlist not found')
        return json_response(200, 'Playlist status updated successfully', data=PlaylistSchema().dump(playlist))

    except ValidationError as e:
        return validation_error_response(e)
    except BadRequest as e:
        return json_response(400, e.description, error={'body': e.description})
    except NotFound as e:
        return json_response(404, e.description, error={'playlist': 'Not found'})
