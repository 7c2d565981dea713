_scalar_types = ['string', 'number', 'boolean']

string_list_schema = {
    'type': 'array',
    'items': {'type': 'string'}
}

scalar_list_schema = {
    'type': 'array',
    'items': {'type': _scalar_types}
}


def single_key_mapping_schema(value_schema):
    """
    Returns a schema for a dictionary with exactly one key, as used by networks and provisioners entries.

    :param value_schema: The schema of the value stored under the single key
    :return: A new jsonschema dict
    """
    return {
        'type': 'object',
        'minProperties': 1,
        'maxProperties': 1,
        'additionalProperties': value_schema
    }


def arguments_schema():
    return {
        'type': 'array',
        'items': {
            'type': 'object',
            'properties': {
                'name': {'type': _scalar_types},
                'value': {'type': _scalar_types}
            },
            'additionalProperties': False
        }
    }
