def enable_nested(vm):
    with vm.provider('libvirt') as libvirt:
        libvirt.set('nested', True)
