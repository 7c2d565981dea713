import os
import sys
import json
import requests
from urllib.parse import urlparse

from ruamel.yaml.error import YAMLError

import nodes_core.commons.yaml as yaml
from nodes_core.commons.exceptions import ArgumentError, ConfigMissing, ConfigEmpty, MalformedEntry

# seconds to wait for the server to connect and to send data
HTTP_TIMEOUT = 30


def load_and_read(location, var_name):
    raw_data = load(location, var_name)
    return read(raw_data, var_name)


def load(location, var_name):
    scheme = urlparse(location).scheme
    if scheme == 'path':
        return _local(location[5:], var_name)
    if scheme == '':
        return _local(location, var_name)
    if scheme == 'http' or scheme == 'https':
        return _http(location, var_name)

    raise ArgumentError('argument "{}" has unknown url scheme'.format(location))


def read(raw_data, var_name):
    """
    Parses the given yaml text. JSON is accepted as well, since it is a subset of yaml.

    :param raw_data: The file content as string
    :param var_name: The name of the file used in error messages
    :return: The parsed dictionary
    :raise ConfigEmpty: If the content parses to nothing
    :raise MalformedEntry: If the content is not yaml formatted or not a dictionary
    """
    try:
        data = yaml.load(raw_data)
    except YAMLError as e:
        raise MalformedEntry('data in {} is not yaml formatted: {}'.format(var_name, ' '.join(str(e).split())))

    if not data:
        raise ConfigEmpty('{} is empty'.format(var_name))

    if not isinstance(data, dict):
        raise MalformedEntry('data in {} does not contain a dictionary'.format(var_name))

    return data


def dump_print(stream, dump_format, error=False):
    if dump_format == 'json':
        print(json.dumps(stream, indent=4), file=sys.stderr if error else sys.stdout)
    elif dump_format in ['yaml', 'yml']:
        yaml.dump_print(stream, error=error)
    else:
        raise ArgumentError('unrecognized dump format "{}"'.format(dump_format))


def _http(location, var_name):
    try:
        r = requests.get(location, timeout=HTTP_TIMEOUT)
        r.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise ConfigMissing('{} could not be loaded via http: {}'.format(var_name, e))
    return r.text


def _local(location, var_name):
    file_path = os.path.expanduser(location)
    if not os.path.isfile(file_path):
        raise ConfigMissing('{} "{}" does not exist'.format(var_name, location))

    with open(file_path) as f:
        return f.read()
