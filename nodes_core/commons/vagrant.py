from collections import OrderedDict
from contextlib import contextmanager

import jsonschema
from jsonschema.exceptions import ValidationError

from nodes_core.commons.exceptions import InvalidAssignment, MalformedEntry
from nodes_core.commons.schemas.engines.provider import provider_engines
from nodes_core.commons.schemas.engines.provisioner import provisioner_engines, provisioner_argument_settings


class _Setting:
    """
    A machine attribute that records every assignment as a configuration call.
    """

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance._values.get(self.name)

    def __set__(self, instance, value):
        instance._values[self.name] = value
        instance.calls.append((self.name, (value,), {}))


class _SettingsContext:
    """
    Base class of provisioner and provider blocks. Settings are checked against the closed jsonschema of the
    context kind, which makes every recognized key a typed setter.
    """
    context_name = None

    def __init__(self, kind, schema):
        self.kind = kind
        self._schema = schema
        self.settings = OrderedDict()

    def set(self, key, value):
        field_schema = self._schema['properties'].get(key)
        if field_schema is None:
            raise InvalidAssignment('{} "{}" has no setting "{}"'.format(self.context_name, self.kind, key))

        try:
            jsonschema.validate(value, field_schema)
        except ValidationError as e:
            raise InvalidAssignment('invalid value for setting "{}" of {} "{}": {}'.format(
                key, self.context_name, self.kind, e.message
            ))

        self.settings[key] = value

    def get(self, key):
        return self.settings.get(key)


class ProvisionerContext(_SettingsContext):
    context_name = 'provisioner'

    def __init__(self, kind):
        schema = provisioner_engines.get(kind)
        if schema is None:
            raise InvalidAssignment('unknown provisioner "{}", supported provisioners are {}'.format(
                kind, list(provisioner_engines.keys())
            ))
        super().__init__(kind, schema)
        self._argument_setting = provisioner_argument_settings.get(kind)

    @property
    def arguments(self):
        if self._argument_setting is None:
            return None
        return self.settings.get(self._argument_setting)

    @arguments.setter
    def arguments(self, arguments):
        if self._argument_setting is None:
            raise InvalidAssignment('provisioner "{}" does not accept arguments'.format(self.kind))
        self.set(self._argument_setting, arguments)


class ProviderContext(_SettingsContext):
    context_name = 'provider'

    def __init__(self, kind):
        schema = provider_engines.get(kind)
        if schema is None:
            raise InvalidAssignment('unknown provider "{}", supported providers are {}'.format(
                kind, list(provider_engines.keys())
            ))
        super().__init__(kind, schema)


class MachineDefinition:
    """
    The configuration of a single Vagrant machine, as written inside a config.vm.define block.

    Every configuration call is appended to calls as (operation, args, kwargs) tuple in the order it was issued.
    """
    box = _Setting()
    box_url = _Setting()
    box_check_update = _Setting()
    hostname = _Setting()

    def __init__(self, name):
        self.name = name
        self.calls = []
        self.networks = []
        self.forwarded_ports = []
        self.synced_folders = []
        self.provisioners = []
        self.providers = OrderedDict()
        self._values = {}

    def network(self, kind, **options):
        self.networks.append((kind, options))
        self.calls.append(('network', (kind,), options))

    def forward_port(self, **options):
        self.forwarded_ports.append(options)
        self.calls.append(('forward_port', (), options))

    def synced_folder(self, host, guest, **options):
        self.synced_folders.append((host, guest, options))
        self.calls.append(('synced_folder', (host, guest), options))

    @contextmanager
    def provision(self, kind):
        provisioner = ProvisionerContext(kind)
        self.provisioners.append(provisioner)
        self.calls.append(('provision', (kind,), {}))
        yield provisioner

    @contextmanager
    def provider(self, kind):
        provider = self.providers.get(kind)
        if provider is None:
            provider = ProviderContext(kind)
            self.providers[kind] = provider
        self.calls.append(('provider', (kind,), {}))
        yield provider

    def count(self, operation):
        return len([c for c in self.calls if c[0] == operation])


class Vagrantfile:
    def __init__(self, api_version):
        self.api_version = api_version
        self.machines = OrderedDict()

    def define(self, name):
        if name in self.machines:
            raise MalformedEntry('machine "{}" is defined more than once'.format(name))

        machine = MachineDefinition(name)
        self.machines[name] = machine
        return machine

    def names(self):
        return list(self.machines.keys())
