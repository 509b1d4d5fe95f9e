from flask import request

INVALID_BODY_MESSAGE = "Request body must be a JSON object or form data"


def request_fields():
    """
    Fields of a JSON object body, or the form fields otherwise.
    Returns None when a JSON body is malformed or not an object.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else None
    return request.form
