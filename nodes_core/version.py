VERSION = '0.1.0'

VAGRANT_API_VERSION = '2'
