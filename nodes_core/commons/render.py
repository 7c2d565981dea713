import re

from jinja2 import Environment, StrictUndefined

_identifier = re.compile('^[a-zA-Z_][a-zA-Z0-9_]*$')

VAGRANTFILE_TEMPLATE = """\
# -*- mode: ruby -*-
# vi: set ft=ruby :

Vagrant.configure({{ api_version | ruby }}) do |config|
{% for machine in machines %}
{% if not loop.first %}

{% endif %}
  config.vm.define {{ machine.name | ruby }} do |node|
{% for key in ['box', 'box_url', 'box_check_update', 'hostname'] %}
{% if machine[key] is not none %}
    node.vm.{{ key }} = {{ machine[key] | ruby }}
{% endif %}
{% endfor %}
{% for kind, options in machine.networks %}
    node.vm.network {{ kind | ruby }}{{ options | kwargs }}
{% endfor %}
{% for options in machine.forwarded_ports %}
    node.vm.network 'forwarded_port'{{ options | kwargs }}
{% endfor %}
{% for host, guest, options in machine.synced_folders %}
    node.vm.synced_folder {{ host | ruby }}, {{ guest | ruby }}{{ options | kwargs }}
{% endfor %}
{% for provisioner in machine.provisioners %}
    node.vm.provision {{ provisioner.kind | ruby }} do |p|
{% for key, value in provisioner.settings.items() %}
      p.{{ key }} = {{ value | ruby }}
{% endfor %}
    end
{% endfor %}
{% for provider in machine.providers.values() %}
    node.vm.provider {{ provider.kind | ruby }} do |p|
{% for key, value in provider.settings.items() %}
      p.{{ key }} = {{ value | ruby }}
{% endfor %}
    end
{% endfor %}
  end
{% endfor %}
end
"""


def ruby_string(s):
    return "'{}'".format(s.replace('\\', '\\\\').replace("'", "\\'"))


def ruby_literal(value):
    """
    Returns the ruby source representation of a value parsed from yaml.
    Strings use single quotes, so that ruby does not interpolate them.
    """
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return ruby_string(value)
    if isinstance(value, (list, tuple)):
        return '[{}]'.format(', '.join(ruby_literal(v) for v in value))
    if isinstance(value, dict):
        if not value:
            return '{}'
        return '{{ {} }}'.format(', '.join(
            '{} {}'.format(ruby_keyword(str(k)), ruby_literal(v)) for k, v in value.items()
        ))

    raise TypeError('value "{}" of type {} has no ruby representation'.format(value, type(value).__name__))


def ruby_keyword(key):
    """
    Returns a symbol key for hashes and keyword arguments, quoted when the key is not an identifier.
    """
    if _identifier.match(key):
        return '{}:'.format(key)
    return '{}:'.format(ruby_string(key))


def ruby_kwargs(options):
    if not options:
        return ''
    return ', ' + ', '.join('{} {}'.format(ruby_keyword(k), ruby_literal(v)) for k, v in options.items())


def _machine_values(machine):
    return {
        'name': machine.name,
        'box': machine.box,
        'box_url': machine.box_url,
        'box_check_update': machine.box_check_update,
        'hostname': machine.hostname,
        'networks': machine.networks,
        'forwarded_ports': machine.forwarded_ports,
        'synced_folders': machine.synced_folders,
        'provisioners': machine.provisioners,
        'providers': machine.providers
    }


def _environment():
    env = Environment(trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True, undefined=StrictUndefined)
    env.filters['ruby'] = ruby_literal
    env.filters['kwargs'] = ruby_kwargs
    return env


def render_vagrantfile(vagrantfile):
    """
    Renders a configured Vagrantfile object as ruby source, which can be written to a file named Vagrantfile.

    :param vagrantfile: The Vagrantfile object
    :return: The Vagrantfile content as string
    """
    template = _environment().from_string(VAGRANTFILE_TEMPLATE)
    return template.render(
        api_version=vagrantfile.api_version,
        machines=[_machine_values(m) for m in vagrantfile.machines.values()]
    )
