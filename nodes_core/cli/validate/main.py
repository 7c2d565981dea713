from argparse import ArgumentParser

from nodes_core.commons.files import dump_print
from nodes_core.commons.nodes import build_vagrantfile
from nodes_core.commons.settings import attach_settings_args, settings_from_args
from nodes_core.commons.exceptions import exception_format, print_error

DESCRIPTION = 'Validate a NODES FILE by configuring all of its machines without rendering them.'


def attach_args(parser):
    attach_settings_args(parser)


def main():
    parser = ArgumentParser(description=DESCRIPTION)
    attach_args(parser)
    args = parser.parse_args()

    result = run(**args.__dict__)

    if args.debug:
        dump_print(result, args.format, error=True)

    if result['state'] == 'succeeded':
        return 0

    return 1


def run(**kwargs):
    result = {
        'nodes': None,
        'calls': None,
        'debugInfo': None,
        'state': 'succeeded'
    }

    try:
        settings = settings_from_args(**kwargs)
        vagrantfile = build_vagrantfile(settings)
        machines = vagrantfile.machines.values()

        result['nodes'] = vagrantfile.names()
        result['calls'] = {m.name: len(m.calls) for m in machines}
        print('{} is valid, defines {} node(s): {}'.format(
            settings.config_file, len(result['nodes']), ', '.join(result['nodes'])
        ))

    except Exception as e:
        result['debugInfo'] = exception_format()
        result['state'] = 'failed'
        print_error(e)

    return result
