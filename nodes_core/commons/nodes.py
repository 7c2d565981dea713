import jsonschema
from jsonschema.exceptions import ValidationError

from nodes_core.commons.configurator import configure_nodes
from nodes_core.commons.exceptions import ConfigEmpty, NoNodesDefined, MalformedEntry
from nodes_core.commons.files import load_and_read
from nodes_core.commons.hooks import builtin_hooks, load_hook_directory
from nodes_core.commons.schemas.nodes import nodes_schema
from nodes_core.commons.vagrant import Vagrantfile


def _error_path(e):
    return '/'.join(str(p) for p in e.absolute_path) or '/'


def nodes_validation(nodes_data):
    """
    Checks that the parsed nodes file has content, defines at least one node and complies with nodes_schema.

    :param nodes_data: The parsed nodes file
    :return: A tuple (boxes, nodes) with the unchanged dictionaries, boxes defaults to an empty dictionary
    :raise ConfigEmpty: If nodes_data is empty
    :raise NoNodesDefined: If nodes is missing or empty
    :raise MalformedEntry: If nodes_data does not comply with nodes_schema
    """
    if not nodes_data:
        raise ConfigEmpty('nodes file is empty')

    if not isinstance(nodes_data, dict):
        raise MalformedEntry('nodes file does not contain a dictionary')

    if not nodes_data.get('nodes'):
        raise NoNodesDefined('no nodes defined in nodes file')

    try:
        jsonschema.validate(nodes_data, nodes_schema)
    except ValidationError as e:
        raise MalformedEntry('nodes file does not comply with jsonschema: {} (at {})'.format(
            e.message, _error_path(e)
        ))

    return nodes_data.get('boxes') or {}, nodes_data['nodes']


def load_nodes(settings):
    """
    Reads the nodes file referenced by settings.

    :raise ConfigMissing: If the file does not exist
    :raise ConfigEmpty: If the file has no content
    """
    return load_and_read(settings.config_file, 'nodes file')


def load_hooks(settings):
    hooks = builtin_hooks()
    load_hook_directory(hooks, settings.hooks_dir)
    return hooks


def configure_vagrantfile(boxes, nodes, settings, hooks):
    vagrantfile = Vagrantfile(settings.api_version)
    configure_nodes(vagrantfile, boxes, nodes, hooks, settings.builtin_providers)
    return vagrantfile


def nodes_to_vagrantfile(nodes_data, settings, hooks):
    boxes, nodes = nodes_validation(nodes_data)
    return configure_vagrantfile(boxes, nodes, settings, hooks)


def build_vagrantfile(settings):
    """
    Loads and validates the nodes file, loads the hooks and configures one machine per node.
    Hooks are loaded only after the nodes file passed validation.

    :param settings: The Settings of this run
    :return: The configured Vagrantfile object
    """
    boxes, nodes = nodes_validation(load_nodes(settings))
    hooks = load_hooks(settings)
    return configure_vagrantfile(boxes, nodes, settings, hooks)
