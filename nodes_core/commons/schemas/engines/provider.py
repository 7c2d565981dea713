from collections import OrderedDict

from nodes_core.commons.schemas.common import string_list_schema

virtualbox_schema = {
    'type': 'object',
    'properties': {
        'name': {'type': 'string'},
        'memory': {'type': 'integer', 'minimum': 1},
        'cpus': {'type': 'integer', 'minimum': 1},
        'gui': {'type': 'boolean'},
        'linked_clone': {'type': 'boolean'},
        'check_guest_additions': {'type': 'boolean'},
        'default_nic_type': {'type': 'string'},
        'auto_nat_dns_proxy': {'type': 'boolean'}
    },
    'additionalProperties': False
}

libvirt_schema = {
    'type': 'object',
    'properties': {
        'title': {'type': 'string'},
        'description': {'type': 'string'},
        'memory': {'type': 'integer', 'minimum': 1},
        'cpus': {'type': 'integer', 'minimum': 1},
        'cpu_mode': {'type': 'string'},
        'nested': {'type': 'boolean'},
        'driver': {'enum': ['kvm', 'qemu']},
        'uri': {'type': 'string'},
        'host': {'type': 'string'},
        'username': {'type': 'string'},
        'machine_type': {'type': 'string'},
        'storage_pool_name': {'type': 'string'},
        'graphics_type': {'type': 'string'},
        'video_type': {'type': 'string'},
        'disk_bus': {'type': 'string'},
        'nic_model_type': {'type': 'string'},
        'management_network_name': {'type': 'string'},
        'management_network_address': {'type': 'string'}
    },
    'additionalProperties': False
}

vmware_desktop_schema = {
    'type': 'object',
    'properties': {
        'gui': {'type': 'boolean'},
        'linked_clone': {'type': 'boolean'},
        'clone_directory': {'type': 'string'},
        'base_mac': {'type': 'string'},
        'base_address': {'type': 'string'},
        'functional_hgfs': {'type': 'boolean'},
        'ssh_info_public': {'type': 'boolean'},
        'verify_vmnet': {'type': 'boolean'}
    },
    'additionalProperties': False
}

hyperv_schema = {
    'type': 'object',
    'properties': {
        'vmname': {'type': 'string'},
        'memory': {'type': 'integer', 'minimum': 1},
        'maxmemory': {'type': 'integer', 'minimum': 1},
        'cpus': {'type': 'integer', 'minimum': 1},
        'linked_clone': {'type': 'boolean'},
        'enable_virtualization_extensions': {'type': 'boolean'},
        'vm_integration_services': {'type': 'object'}
    },
    'additionalProperties': False
}

docker_schema = {
    'type': 'object',
    'properties': {
        'name': {'type': 'string'},
        'image': {'type': 'string'},
        'build_dir': {'type': 'string'},
        'cmd': string_list_schema,
        'env': {'type': 'object'},
        'ports': string_list_schema,
        'volumes': string_list_schema,
        'privileged': {'type': 'boolean'},
        'remains_running': {'type': 'boolean'},
        'has_ssh': {'type': 'boolean'}
    },
    'additionalProperties': False
}

parallels_schema = {
    'type': 'object',
    'properties': {
        'name': {'type': 'string'},
        'memory': {'type': 'integer', 'minimum': 1},
        'cpus': {'type': 'integer', 'minimum': 1},
        'linked_clone': {'type': 'boolean'},
        'update_guest_tools': {'type': 'boolean'}
    },
    'additionalProperties': False
}

provider_engines = {
    'virtualbox': virtualbox_schema,
    'libvirt': libvirt_schema,
    'vmware_desktop': vmware_desktop_schema,
    'hyperv': hyperv_schema,
    'docker': docker_schema,
    'parallels': parallels_schema
}

# providers configured for every node: provider -> (display name setting, memory setting, cpus setting)
builtin_providers = OrderedDict([
    ('virtualbox', ('name', 'memory', 'cpus')),
    ('libvirt', ('title', 'memory', 'cpus'))
])
