from nodes_core.commons.schemas.common import scalar_list_schema, string_list_schema

_env_schema = {
    'type': 'object',
    'additionalProperties': {'type': ['string', 'number', 'boolean']}
}

_run_schema = {'enum': ['once', 'always', 'never']}

shell_schema = {
    'type': 'object',
    'properties': {
        'inline': {'type': ['string', 'array'], 'items': {'type': 'string'}},
        'path': {'type': 'string'},
        'args': scalar_list_schema,
        'env': _env_schema,
        'binary': {'type': 'boolean'},
        'privileged': {'type': 'boolean'},
        'name': {'type': 'string'},
        'upload_path': {'type': 'string'},
        'keep_color': {'type': 'boolean'},
        'reboot': {'type': 'boolean'},
        'reset': {'type': 'boolean'},
        'sensitive': {'type': 'boolean'},
        'powershell_args': {'type': 'string'},
        'run': _run_schema
    },
    'additionalProperties': False
}

file_schema = {
    'type': 'object',
    'properties': {
        'source': {'type': 'string'},
        'destination': {'type': 'string'},
        'run': _run_schema
    },
    'additionalProperties': False
}

ansible_schema = {
    'type': 'object',
    'properties': {
        'playbook': {'type': 'string'},
        'inventory_path': {'type': 'string'},
        'config_file': {'type': 'string'},
        'galaxy_file': {'type': 'string'},
        'galaxy_role_file': {'type': 'string'},
        'compatibility_mode': {'enum': ['auto', '1.8', '2.0']},
        'extra_vars': {'type': ['object', 'string']},
        'groups': {'type': 'object'},
        'host_vars': {'type': 'object'},
        'limit': {'type': ['string', 'array']},
        'tags': {'type': ['string', 'array']},
        'skip_tags': {'type': ['string', 'array']},
        'become': {'type': 'boolean'},
        'become_user': {'type': 'string'},
        'verbose': {'type': ['string', 'boolean']},
        'raw_arguments': scalar_list_schema,
        'run': _run_schema
    },
    'additionalProperties': False
}

ansible_local_schema = {
    'type': 'object',
    'properties': dict(ansible_schema['properties'], **{
        'install': {'type': 'boolean'},
        'install_mode': {'enum': ['default', 'pip', 'pip_args_only', 'pip3']},
        'provisioning_path': {'type': 'string'},
        'tmp_path': {'type': 'string'},
        'version': {'type': 'string'}
    }),
    'additionalProperties': False
}

puppet_schema = {
    'type': 'object',
    'properties': {
        'manifests_path': {'type': 'string'},
        'manifest_file': {'type': 'string'},
        'module_path': {'type': ['string', 'array']},
        'hiera_config_path': {'type': 'string'},
        'environment': {'type': 'string'},
        'environment_path': {'type': 'string'},
        'facter': {'type': 'object'},
        'working_directory': {'type': 'string'},
        'options': scalar_list_schema,
        'run': _run_schema
    },
    'additionalProperties': False
}

docker_schema = {
    'type': 'object',
    'properties': {
        'images': string_list_schema,
        'version': {'type': 'string'},
        'post_install_provision': {'type': 'string'},
        'run': _run_schema
    },
    'additionalProperties': False
}

provisioner_engines = {
    'shell': shell_schema,
    'file': file_schema,
    'ansible': ansible_schema,
    'ansible_local': ansible_local_schema,
    'puppet': puppet_schema,
    'docker': docker_schema
}

# setting which receives the flattened arguments list, None if the provisioner takes no arguments
provisioner_argument_settings = {
    'shell': 'args',
    'file': None,
    'ansible': 'raw_arguments',
    'ansible_local': 'raw_arguments',
    'puppet': 'options',
    'docker': None
}
