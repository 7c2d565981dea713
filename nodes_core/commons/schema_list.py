from nodes_core.commons.schemas.nodes import nodes_schema, node_schema
from nodes_core.commons.schemas.engines.provider import provider_engines
from nodes_core.commons.schemas.engines.provisioner import provisioner_engines


schemas = [
    ('nodes', nodes_schema),
    ('node', node_schema)
]

for e, s in provisioner_engines.items():
    schemas.append(('provisioner-{}'.format(e), s))

for e, s in provider_engines.items():
    schemas.append(('provider-{}'.format(e), s))
