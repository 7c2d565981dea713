from nodes_core.cli.render.main import run as render_run
from nodes_core.cli.validate.main import run as validate_run
from nodes_core.cli.schema.main import run as schema_run

NODES_FILE = '''\
boxes: {}
nodes:
  web:
    box: ubuntu/focal64
    hostname: web1
    memory: 512
    cpus: 2
    external_functions:
      - open_http
'''

HOOK_FILE = '''\
def open_http(vm):
    vm.forward_port(guest=80, host=8080)
'''


def _workspace(tmp_path, nodes_file=NODES_FILE):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text(nodes_file)
    hooks_dir = tmp_path / 'hooks'
    hooks_dir.mkdir()
    (hooks_dir / 'network.py').write_text(HOOK_FILE)
    return {'config': str(config_file), 'hooks_dir': str(hooks_dir), 'api_version': '2'}


def test_render_to_stdout(tmp_path, capsys):
    result = render_run(**_workspace(tmp_path))

    assert result['state'] == 'succeeded'
    assert result['nodes'] == ['web']

    out = capsys.readouterr().out
    assert out.startswith('# -*- mode: ruby -*-')
    assert "node.vm.network 'forwarded_port', guest: 80, host: 8080" in out


def test_render_to_file(tmp_path, capsys):
    output = tmp_path / 'Vagrantfile'

    result = render_run(output=str(output), **_workspace(tmp_path))

    assert result['state'] == 'succeeded'
    assert capsys.readouterr().out == ''
    assert "config.vm.define 'web' do |node|" in output.read_text()


def test_render_no_nodes(tmp_path, capsys):
    output = tmp_path / 'Vagrantfile'

    result = render_run(output=str(output), **_workspace(tmp_path, 'boxes: {}\nnodes: {}\n'))

    assert result['state'] == 'failed'
    assert result['debugInfo']
    assert capsys.readouterr().out == 'ERROR: no nodes defined in nodes file\n'
    assert not output.exists()


def test_render_missing_config(tmp_path, capsys):
    result = render_run(config=str(tmp_path / 'nodes.yml'), hooks_dir=str(tmp_path / 'hooks'), api_version='2')

    assert result['state'] == 'failed'

    out = capsys.readouterr().out
    assert out.startswith('ERROR: nodes file')
    assert len(out.splitlines()) == 1


def test_validate_broken_yaml(tmp_path, capsys):
    result = validate_run(**_workspace(tmp_path, 'nodes:\n  web: [\n'))

    assert result['state'] == 'failed'

    out = capsys.readouterr().out
    assert out.startswith('ERROR: data in nodes file is not yaml formatted')
    assert len(out.splitlines()) == 1


def test_validate(tmp_path, capsys):
    result = validate_run(debug=False, format='yaml', **_workspace(tmp_path))

    assert result['state'] == 'succeeded'
    assert result['nodes'] == ['web']
    assert 'defines 1 node(s): web' in capsys.readouterr().out


def test_validate_unknown_hook(tmp_path, capsys):
    nodes_file = NODES_FILE.replace('open_http', 'open_https')

    result = validate_run(**_workspace(tmp_path, nodes_file))

    assert result['state'] == 'failed'
    assert capsys.readouterr().out.startswith('ERROR: external function "open_https" is not registered')


def test_schema_list(capsys):
    assert schema_run(schema=None, format='json') == 0

    names = capsys.readouterr().out.splitlines()
    assert names[:2] == ['nodes', 'node']
    assert 'provisioner-shell' in names
    assert 'provider-virtualbox' in names


def test_schema_show(capsys):
    assert schema_run(schema='provider-libvirt', format='json') == 0
    assert '"title"' in capsys.readouterr().out


def test_schema_unknown(capsys):
    assert schema_run(schema='provider-xen', format='json') == 1
    assert capsys.readouterr().out.startswith('ERROR: schema "provider-xen" not found')
