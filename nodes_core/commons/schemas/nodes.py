from nodes_core.commons.schema_transform import transform
from nodes_core.commons.schemas.common import single_key_mapping_schema, arguments_schema, string_list_schema

_network_schema = single_key_mapping_schema({
    'oneOf': [
        {'type': 'object'},
        {'type': 'null'}
    ]
})

_synced_folder_schema = {
    'type': 'object',
    'properties': {
        'host': {'type': 'string'},
        'guest': {'type': 'string'},
        'type': {'type': 'string'}
    },
    'required': ['host', 'guest']
}

_port_schema = {
    'type': 'object',
    'properties': {
        'guest': {'type': 'integer', 'minimum': 1, 'maximum': 65535},
        'host': {'type': 'integer', 'minimum': 1, 'maximum': 65535},
        'protocol': {'enum': ['tcp', 'udp']}
    },
    'required': ['guest', 'host']
}

_provisioner_schema = single_key_mapping_schema({
    'oneOf': [
        {
            'type': 'object',
            'properties': {
                'arguments': arguments_schema()
            }
        },
        {'type': 'null'}
    ]
})

_node_schema = {
    'type': 'object',
    'properties': {
        'box': {'type': 'string'},
        'hostname': {'type': 'string'},
        'memory': {'type': 'integer', 'minimum': 1},
        'cpus': {'type': 'integer', 'minimum': 1},
        'networks': {
            'type': 'array',
            'items': _network_schema
        },
        'synced_folders': {
            'type': 'array',
            'items': _synced_folder_schema
        },
        'ports': {
            'type': 'array',
            'items': _port_schema
        },
        'provisioners': {
            'type': 'array',
            'items': _provisioner_schema
        },
        'providers': {
            'type': 'object',
            'additionalProperties': {
                'oneOf': [
                    {'type': 'object'},
                    {'type': 'null'}
                ]
            }
        },
        'external_functions': string_list_schema
    },
    'additionalProperties': False
}

_nodes_schema = {
    'type': 'object',
    'properties': {
        'boxes': {
            'type': 'object',
            'additionalProperties': {'type': 'string'}
        },
        'nodes': {
            'type': 'object',
            'minProperties': 1,
            'additionalProperties': {
                'oneOf': [
                    _node_schema,
                    {'type': 'null'}
                ]
            }
        }
    },
    'additionalProperties': False,
    'required': ['nodes']
}

# optional keys accept null and every object accepts a doc string
node_schema = transform(_node_schema)
nodes_schema = transform(_nodes_schema)
