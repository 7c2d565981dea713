from argparse import ArgumentParser
from collections import OrderedDict

from nodes_core.commons.files import dump_print
from nodes_core.commons.schema_list import schemas
from nodes_core.commons.exceptions import print_error

DESCRIPTION = 'List the jsonschemas of the NODES FILE, provisioners and providers, or show a single schema.'


def attach_args(parser):
    parser.add_argument(
        'schema', action='store', type=str, metavar='SCHEMA', nargs='?',
        help='SCHEMA to show. If omitted, the names of all schemas are listed.'
    )
    parser.add_argument(
        '--format', action='store', type=str, metavar='FORMAT', choices=['json', 'yaml', 'yml'], default='json',
        help='Specify schema FORMAT as one of [json, yaml, yml]. Default is json.'
    )


def main():
    parser = ArgumentParser(description=DESCRIPTION)
    attach_args(parser)
    args = parser.parse_args()
    return run(**args.__dict__)


def run(schema, format, **_):
    schemas_by_name = OrderedDict(schemas)

    if not schema:
        for name in schemas_by_name:
            print(name)
        return 0

    if schema not in schemas_by_name:
        print_error('schema "{}" not found, use one of {}'.format(schema, list(schemas_by_name.keys())))
        return 1

    dump_print(schemas_by_name[schema], format)
    return 0
