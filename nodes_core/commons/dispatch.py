from nodes_core.commons.exceptions import MalformedEntry

DOC_KEY = 'doc'
ARGUMENTS_KEY = 'arguments'


def parameter_name(key):
    return str(key).replace('-', '_')


def setter_params(mapping):
    """
    Converts the keys of a yaml mapping to keyword parameter names of a setter call.
    Doc keys and keys with null values are left out.

    :param mapping: A dictionary as found in the yaml file, or None
    :return: A new dictionary usable as **kwargs
    """
    if not mapping:
        return {}

    return {parameter_name(key): val for key, val in mapping.items() if key != DOC_KEY and val is not None}


def flatten_arguments(pairs):
    """
    Flattens a list of name/value pairs into a positional argument list.
    For each pair the name is added if present, then the value if present.

    :param pairs: A list of dictionaries with optional keys name and value
    :return: A list of strings
    """
    arguments = []
    for pair in pairs or []:
        if not isinstance(pair, dict):
            raise MalformedEntry('argument entry "{}" is not a dictionary'.format(pair))

        for key in ['name', 'value']:
            val = pair.get(key)
            if val is not None:
                arguments.append(_argument_str(val))

    return arguments


def _argument_str(val):
    if isinstance(val, bool):
        return 'true' if val else 'false'
    return str(val)


def assign(context, key, value):
    """
    Assigns a single setting on a provisioner or provider context.
    Doc keys and null values are skipped.

    :raise InvalidAssignment: If the context has no setting with the given key or the value has a wrong type
    """
    if key == DOC_KEY or value is None:
        return

    context.set(parameter_name(key), value)


def assign_all(context, settings):
    for key, value in (settings or {}).items():
        assign(context, key, value)


def assign_provisioner_settings(provisioner, settings):
    for key, value in (settings or {}).items():
        if key == ARGUMENTS_KEY:
            if value is not None:
                provisioner.arguments = flatten_arguments(value)
        else:
            assign(provisioner, key, value)


def single_key(entry, entry_name):
    """
    Returns the only key and value of a single key dictionary, like a networks or provisioners entry.

    :raise MalformedEntry: If entry is not a dictionary with exactly one key
    """
    if not isinstance(entry, dict) or len(entry) != 1:
        raise MalformedEntry('{} entry "{}" must be a dictionary with exactly one key'.format(entry_name, entry))

    return next(iter(entry.items()))
