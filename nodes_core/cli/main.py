import sys
from collections import OrderedDict
from argparse import ArgumentParser

from nodes_core.cli.render.main import main as render_main
from nodes_core.cli.validate.main import main as validate_main
from nodes_core.cli.schema.main import main as schema_main

from nodes_core.cli.render.main import DESCRIPTION as RENDER_DESCRIPTION
from nodes_core.cli.validate.main import DESCRIPTION as VALIDATE_DESCRIPTION
from nodes_core.cli.schema.main import DESCRIPTION as SCHEMA_DESCRIPTION

from nodes_core.version import VERSION

SCRIPT_NAME = 'nodesfile'

DESCRIPTION = 'Translate a yaml description of virtual machines into a Vagrant configuration.'

MODES = OrderedDict([
    ('render', {'main': render_main, 'description': RENDER_DESCRIPTION}),
    ('validate', {'main': validate_main, 'description': VALIDATE_DESCRIPTION}),
    ('schema', {'main': schema_main, 'description': SCHEMA_DESCRIPTION})
])


def main():
    sys.argv[0] = SCRIPT_NAME

    parser = ArgumentParser(description=DESCRIPTION)
    parser.add_argument(
        '-v', '--version', action='version', version=VERSION
    )
    subparsers = parser.add_subparsers(title='operation modes')

    for key, val in MODES.items():
        subparsers.add_parser(key, help=val['description'], add_help=False)

    if len(sys.argv) < 2:
        parser.print_help()
        exit()

    _ = parser.parse_known_args()

    if sys.argv[1] not in MODES:
        parser.print_help()
        exit(1)

    mode = MODES[sys.argv[1]]['main']
    sys.argv[0] = '{} {}'.format(SCRIPT_NAME, sys.argv[1])
    del sys.argv[1]
    exit(mode())
