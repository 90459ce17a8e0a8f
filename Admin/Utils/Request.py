from flask import request
from werkzeug.exceptions import BadRequest


def get_json_body():
    """Return the request body as a dict, or raise BadRequest."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest(description='Request body must be a JSON object')
    return data
