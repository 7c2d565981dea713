"""
External functions available to every nodes file without a hook directory.
"""


def disable_default_synced_folder(vm):
    vm.synced_folder('.', '/vagrant', disabled=True)


def skip_box_update(vm):
    vm.box_check_update = False
