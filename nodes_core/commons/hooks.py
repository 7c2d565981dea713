import os
import inspect
import importlib.util
from collections import OrderedDict

from nodes_core.commons.exceptions import UnknownHook
from nodes_core.commons import builtin_hooks as builtin_hooks_module

HOOK_MODULE_PREFIX = 'nodes_hooks'


class HookRegistry:
    """
    Table of external functions, referenced by name from the external_functions list of a node.
    Each function takes the machine definition as its only argument.
    """

    def __init__(self):
        self._hooks = OrderedDict()

    def register(self, name, func):
        if not callable(func):
            raise TypeError('hook "{}" is not callable'.format(name))
        self._hooks[name] = func

    def get(self, name):
        try:
            return self._hooks[name]
        except KeyError:
            raise UnknownHook('external function "{}" is not registered, known functions are {}'.format(
                name, self.names()
            ))

    def names(self):
        return list(self._hooks.keys())

    def __contains__(self, name):
        return name in self._hooks


def _module_functions(module):
    return [
        (name, obj) for name, obj in inspect.getmembers(module, inspect.isfunction)
        if not name.startswith('_') and obj.__module__ == module.__name__
    ]


def builtin_hooks():
    registry = HookRegistry()
    for name, func in _module_functions(builtin_hooks_module):
        registry.register(name, func)
    return registry


def load_hook_directory(registry, directory):
    """
    Imports every python file of the given directory, sorted by file name, and registers each public function
    defined in it under its function name. Later definitions replace earlier ones with the same name.

    :param registry: The HookRegistry to fill
    :param directory: The hook directory. If it does not exist, nothing is loaded.
    :return: The list of registered names
    """
    if not directory or not os.path.isdir(directory):
        return []

    registered = []
    for file_name in sorted(os.listdir(directory)):
        stem, ext = os.path.splitext(file_name)
        file_path = os.path.join(directory, file_name)
        if ext != '.py' or stem.startswith('_') or not os.path.isfile(file_path):
            continue

        spec = importlib.util.spec_from_file_location('{}.{}'.format(HOOK_MODULE_PREFIX, stem), file_path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        for name, func in _module_functions(module):
            registry.register(name, func)
            registered.append(name)

    return registered
