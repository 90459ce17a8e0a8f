from flask import jsonify


def base_response(code, status, message, data=None, error=None):
    """
    Create a standardized API response.
    
    Args:
        code (int): HTTP status code
        status (str): Status of the response (e.g., 'success', 'error')
        message (str): Descriptive message about the response
        data (dict | list, optional): Response data payload
        error (dict, optional): Error details if any
        
    Returns:
        dict: Standardized response dictionary
    """
    response = {
        'code': code,
        'status': status,
        'message': message,
        'data': data if data is not None else {},
        'error': error if error is not None else {}
    }
    return response


def json_response(code, message, data=None, error=None):
    """Wrap base_response in a Flask response carrying the same status code."""
    status = 'success' if code < 400 else 'error'
    return jsonify(base_response(
        code=code,
        status=status,
        message=message,
        data=data,
        error=error
    )), code


def first_error_message(messages):
    """
    Pull the first message out of a marshmallow ValidationError.messages tree.

    Nested dicts (e.g. from many=True or nested schemas) are walked depth-first
    in insertion order, which follows the schema's field declaration order.
    """
    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        for value in messages.values():
            found = first_error_message(value)
            if found:
                return found
    if isinstance(messages, (list, tuple)):
        for value in messages:
            found = first_error_message(value)
            if found:
                return found
    return None


def validation_error_response(err):
    message = first_error_message(err.messages) or 'Validation error'
    return json_response(400, message, error=err.messages)
