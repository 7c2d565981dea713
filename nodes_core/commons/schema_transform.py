from copy import deepcopy

_null_schema = {'type': 'null'}


def transform(schema):
    """
    Prepares a nodes file schema for validation. Every mapping with named keys accepts a doc string, and every
    optional key also accepts null, which the configurator treats like an absent key.

    :param schema: jsonschema dict, left unchanged
    :return: A transformed copy of the jsonschema dict
    """
    schema = deepcopy(schema)
    _transform(schema)
    return schema


def _nullable(subschema):
    if 'oneOf' in subschema:
        if _null_schema not in subschema['oneOf']:
            subschema['oneOf'].append(dict(_null_schema))
        return subschema

    if 'type' in subschema or 'enum' in subschema:
        if subschema == _null_schema:
            return {'oneOf': [subschema]}
        return {'oneOf': [subschema, dict(_null_schema)]}

    return subschema


def _transform(schema):
    for combinator in ['anyOf', 'oneOf']:
        if combinator in schema:
            for subschema in schema[combinator]:
                _transform(subschema)
            return

    if 'type' not in schema:
        return

    if schema['type'] == 'array':
        items = schema.get('items')
        if items:
            _transform(items)
        return

    if schema['type'] != 'object':
        return

    if 'patternProperties' in schema:
        for subschema in schema['patternProperties'].values():
            _transform(subschema)

    elif 'properties' in schema:
        properties = schema['properties']
        properties['doc'] = {'type': 'string'}

        required = schema.get('required', [])
        for key in list(properties.keys()):
            if key not in required:
                properties[key] = _nullable(properties[key])
            _transform(properties[key])

    # free key mappings like nodes and providers
    additional_properties = schema.get('additionalProperties')
    if isinstance(additional_properties, dict):
        _transform(additional_properties)
