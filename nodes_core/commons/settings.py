from nodes_core.version import VAGRANT_API_VERSION
from nodes_core.commons.schemas.engines.provider import builtin_providers as default_builtin_providers

NODES_FILE = 'nodes.yml'
HOOKS_DIR = 'hooks'


class Settings:
    """
    Values that control a single run. Relative paths are resolved against the invocation directory.
    """

    def __init__(self, config_file=NODES_FILE, hooks_dir=HOOKS_DIR, api_version=VAGRANT_API_VERSION,
                 builtin_providers=None):
        self.config_file = config_file
        self.hooks_dir = hooks_dir
        self.api_version = api_version
        self.builtin_providers = builtin_providers if builtin_providers is not None else default_builtin_providers


def attach_settings_args(parser):
    parser.add_argument(
        '-c', '--config', action='store', type=str, metavar='FILE_PATH_OR_URL', default=NODES_FILE,
        help='NODES FILE (yaml) describing the machines as local PATH or http URL. Default is {}.'.format(NODES_FILE)
    )
    parser.add_argument(
        '--hooks-dir', action='store', type=str, metavar='DIR_PATH', default=HOOKS_DIR,
        help='Directory containing python files with external functions. Default is {}.'.format(HOOKS_DIR)
    )
    parser.add_argument(
        '--api-version', action='store', type=str, metavar='VERSION', default=VAGRANT_API_VERSION,
        help='Vagrant configuration API VERSION. Default is {}.'.format(VAGRANT_API_VERSION)
    )
    parser.add_argument(
        '-d', '--debug', action='store_true',
        help='Write debug info, including detailed exceptions, to stderr.'
    )
    parser.add_argument(
        '--format', action='store', type=str, metavar='FORMAT', choices=['json', 'yaml', 'yml'], default='yaml',
        help='Specify debug info FORMAT as one of [json, yaml, yml]. Default is yaml.'
    )


def settings_from_args(config, hooks_dir, api_version, **_):
    return Settings(config_file=config, hooks_dir=hooks_dir, api_version=api_version)
