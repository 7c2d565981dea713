from nodes_core.commons.dispatch import setter_params, single_key, assign, assign_all, assign_provisioner_settings
from nodes_core.commons.exceptions import MalformedEntry
from nodes_core.commons.schemas.engines.provider import builtin_providers as default_builtin_providers


def configure_nodes(vagrantfile, boxes, nodes, hooks, builtin_providers=None):
    """
    Defines one machine per node in the given vagrantfile, in the order of the nodes dictionary.

    :param vagrantfile: The Vagrantfile object to configure
    :param boxes: Dictionary of box names to box urls
    :param nodes: Dictionary of node names to node details
    :param hooks: The HookRegistry used to resolve external_functions
    :param builtin_providers: Providers configured for every node, defaults to virtualbox and libvirt
    :return: The list of configured machine definitions
    """
    if builtin_providers is None:
        builtin_providers = default_builtin_providers

    machines = []
    for node_name, node_details in nodes.items():
        node_details = node_details or {}
        if not isinstance(node_details, dict):
            raise MalformedEntry('details of node "{}" must be a dictionary'.format(node_name))

        vm = vagrantfile.define(str(node_name))
        configure_node(vm, boxes, node_details, hooks, builtin_providers)
        machines.append(vm)

    return machines


def configure_node(vm, boxes, node_details, hooks, builtin_providers):
    configure_basic_info(vm, boxes, node_details)
    configure_networks(vm, node_details.get('networks'))
    configure_synced_folders(vm, node_details.get('synced_folders'))
    configure_ports(vm, node_details.get('ports'))
    configure_provisioners(vm, node_details.get('provisioners'))
    configure_providers(vm, node_details, builtin_providers)
    run_external_functions(vm, hooks, node_details.get('external_functions'))


def configure_basic_info(vm, boxes, node_details):
    box = node_details.get('box')
    if box is not None:
        vm.box = box
        if boxes and box in boxes:
            vm.box_url = boxes[box]

    hostname = node_details.get('hostname')
    if hostname is not None:
        vm.hostname = hostname


def configure_networks(vm, networks):
    # order matters, some providers number network devices by position
    for entry in networks or []:
        kind, params = single_key(entry, 'networks')
        if params is not None and not isinstance(params, dict):
            raise MalformedEntry('parameters of network "{}" must be a dictionary'.format(kind))

        if params:
            vm.network(kind, **setter_params(params))
        else:
            vm.network(kind)


def configure_synced_folders(vm, synced_folders):
    for folder in synced_folders or []:
        if not isinstance(folder, dict) or 'host' not in folder or 'guest' not in folder:
            raise MalformedEntry('synced_folders entry "{}" requires the keys host and guest'.format(folder))

        options = setter_params({key: val for key, val in folder.items() if key not in ['host', 'guest']})
        vm.synced_folder(folder['host'], folder['guest'], **options)


def configure_ports(vm, ports):
    for port in ports or []:
        if not isinstance(port, dict):
            raise MalformedEntry('ports entry "{}" must be a dictionary'.format(port))
        vm.forward_port(**setter_params(port))


def configure_provisioners(vm, provisioners):
    for entry in provisioners or []:
        kind, settings = single_key(entry, 'provisioners')
        if settings is not None and not isinstance(settings, dict):
            raise MalformedEntry('settings of provisioner "{}" must be a dictionary'.format(kind))

        with vm.provision(kind) as provisioner:
            assign_provisioner_settings(provisioner, settings)


def configure_providers(vm, node_details, builtin_providers):
    providers = node_details.get('providers') or {}
    for kind, params in providers.items():
        if params is not None and not isinstance(params, dict):
            raise MalformedEntry('settings of provider "{}" must be a dictionary'.format(kind))

        with vm.provider(kind) as provider:
            assign_all(provider, params)

    # applied after the user settings, the node level values take precedence
    memory = node_details.get('memory')
    cpus = node_details.get('cpus')
    for kind, (name_key, memory_key, cpus_key) in builtin_providers.items():
        with vm.provider(kind) as provider:
            assign(provider, name_key, vm.name)
            assign(provider, memory_key, memory)
            assign(provider, cpus_key, cpus)


def run_external_functions(vm, hooks, external_functions):
    for name in external_functions or []:
        hooks.get(name)(vm)
