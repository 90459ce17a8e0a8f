import json

# field name -> structured shape the client may send instead of encoded text
STRUCTURED_PLACE_FIELDS = {
    'coordinates': (dict, list),
    'amenities': list,
}


def preprocess_place_body(body):
    """
    Coordinates and amenities are stored as JSON text. Clients may send them
    either already encoded or structured (coordinates as an object or a
    [lat, lng] pair, amenities as a list); the latter are encoded here
    before the body reaches PlaceSchema.
    """
    body = dict(body)
    for field, shape in STRUCTURED_PLACE_FIELDS.items():
        if isinstance(body.get(field), shape):
            body[field] = json.dumps(body[field])
    return body
