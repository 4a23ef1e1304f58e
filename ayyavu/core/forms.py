from flask import request


def request_data():
    """Form fields or JSON object body, whichever the client sent.

    A JSON body that is not an object (an array, a bare string) is treated
    as empty.
    """
    if request.form:
        return request.form
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
