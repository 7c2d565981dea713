from argparse import ArgumentParser

from nodes_core.commons.files import dump_print
from nodes_core.commons.nodes import build_vagrantfile
from nodes_core.commons.render import render_vagrantfile
from nodes_core.commons.settings import attach_settings_args, settings_from_args
from nodes_core.commons.exceptions import exception_format, print_error

DESCRIPTION = 'Render the machines described in a NODES FILE as Vagrantfile.'


def attach_args(parser):
    attach_settings_args(parser)
    parser.add_argument(
        '-o', '--output', action='store', type=str, metavar='FILE_PATH',
        help='Write the Vagrantfile to FILE_PATH instead of stdout.'
    )


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


def run(output=None, **kwargs):
    result = {
        'nodes': None,
        'output': output,
        'debugInfo': None,
        'state': 'succeeded'
    }

    try:
        settings = settings_from_args(**kwargs)
        vagrantfile = build_vagrantfile(settings)
        result['nodes'] = vagrantfile.names()

        content = render_vagrantfile(vagrantfile)
        if output:
            with open(output, 'w') as f:
                f.write(content)
        else:
            print(content, end='')

    except Exception as e:
        result['debugInfo'] = exception_format()
        result['state'] = 'failed'
        print_error(e)

    return result
