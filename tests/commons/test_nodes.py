import jsonschema
import pytest

from nodes_core.commons.exceptions import ConfigEmpty, ConfigMissing, NoNodesDefined, MalformedEntry
from nodes_core.commons.hooks import builtin_hooks
from nodes_core.commons.nodes import nodes_validation, nodes_to_vagrantfile, build_vagrantfile
from nodes_core.commons.schemas.nodes import nodes_schema
from nodes_core.commons.settings import Settings

NODES_DATA = {
    'boxes': {
        'focal': 'https://example.org/boxes/focal.box'
    },
    'nodes': {
        'web': {
            'doc': 'frontend machine',
            'box': 'focal',
            'hostname': 'web1',
            'memory': 1024,
            'cpus': 2,
            'networks': [
                {'private_network': {'ip': '192.168.56.10'}},
                {'public_network': None}
            ],
            'synced_folders': [
                {'host': './site', 'guest': '/var/www', 'type': 'rsync'}
            ],
            'ports': [
                {'guest': 80, 'host': 8080, 'protocol': 'tcp'}
            ],
            'provisioners': [
                {'shell': {'inline': 'echo hi', 'arguments': [{'name': '--flag'}]}}
            ],
            'providers': {
                'virtualbox': {'gui': False}
            },
            'external_functions': ['skip_box_update']
        },
        'db': {
            'box': 'ubuntu/focal64'
        }
    }
}


def test_schema_accepts_full_document():
    jsonschema.validate(NODES_DATA, nodes_schema)


def test_validation_returns_boxes_and_nodes():
    boxes, nodes = nodes_validation(NODES_DATA)

    assert boxes is NODES_DATA['boxes']
    assert nodes is NODES_DATA['nodes']


def test_validation_defaults_boxes():
    boxes, nodes = nodes_validation({'nodes': {'web': {'box': 'ubuntu/focal64'}}})

    assert boxes == {}
    assert list(nodes.keys()) == ['web']


def test_validation_accepts_node_without_details():
    _, nodes = nodes_validation({'nodes': {'web': None}})

    assert nodes == {'web': None}


@pytest.mark.parametrize('nodes_data', [None, {}])
def test_validation_empty(nodes_data):
    with pytest.raises(ConfigEmpty):
        nodes_validation(nodes_data)


@pytest.mark.parametrize('nodes_data', [
    {'boxes': {}},
    {'boxes': {}, 'nodes': None},
    {'boxes': {}, 'nodes': {}}
])
def test_validation_no_nodes(nodes_data):
    with pytest.raises(NoNodesDefined):
        nodes_validation(nodes_data)


def test_validation_not_a_dictionary():
    with pytest.raises(MalformedEntry):
        nodes_validation(['web'])


def test_validation_unknown_top_level_key():
    with pytest.raises(MalformedEntry):
        nodes_validation({'nodes': {'web': None}, 'machines': {}})


def test_validation_unknown_node_key():
    with pytest.raises(MalformedEntry):
        nodes_validation({'nodes': {'web': {'boxx': 'ubuntu/focal64'}}})


def test_validation_provisioner_with_two_keys():
    nodes_data = {
        'nodes': {
            'web': {
                'provisioners': [
                    {'shell': {'inline': 'echo hi'}, 'file': {'source': 'a', 'destination': 'b'}}
                ]
            }
        }
    }

    with pytest.raises(MalformedEntry):
        nodes_validation(nodes_data)


def test_validation_network_not_a_mapping():
    with pytest.raises(MalformedEntry):
        nodes_validation({'nodes': {'web': {'networks': ['private_network']}}})


def test_validation_error_names_path():
    with pytest.raises(MalformedEntry) as e:
        nodes_validation({'nodes': {'web': {'memory': 'lots'}}})

    assert 'nodes/web' in str(e.value)


def test_no_nodes_defined_configures_nothing():
    hooks = builtin_hooks()
    with pytest.raises(NoNodesDefined):
        nodes_to_vagrantfile({'boxes': {}, 'nodes': {}}, Settings(), hooks)


def test_build_vagrantfile(tmp_path):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text(
        'boxes: {}\n'
        'nodes:\n'
        '  web:\n'
        '    box: ubuntu/focal64\n'
        '  db:\n'
        '    box: ubuntu/jammy64\n'
    )
    settings = Settings(config_file=str(config_file), hooks_dir=str(tmp_path / 'hooks'))

    vagrantfile = build_vagrantfile(settings)

    assert vagrantfile.api_version == '2'
    assert vagrantfile.names() == ['web', 'db']


def test_build_vagrantfile_missing_file(tmp_path):
    settings = Settings(config_file=str(tmp_path / 'nodes.yml'))

    with pytest.raises(ConfigMissing):
        build_vagrantfile(settings)


def test_build_vagrantfile_empty_file(tmp_path):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text('# nothing here\n')
    settings = Settings(config_file=str(config_file))

    with pytest.raises(ConfigEmpty):
        build_vagrantfile(settings)


def test_build_vagrantfile_validates_before_loading_hooks(tmp_path):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text('nodes: {}\n')
    hooks_dir = tmp_path / 'hooks'
    hooks_dir.mkdir()
    (hooks_dir / 'broken.py').write_text('raise RuntimeError("must not be imported")\n')
    settings = Settings(config_file=str(config_file), hooks_dir=str(hooks_dir))

    with pytest.raises(NoNodesDefined):
        build_vagrantfile(settings)
