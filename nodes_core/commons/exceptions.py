from traceback import format_exc


def _lstrip_quarter(s):
    len_s = len(s)
    s = s.lstrip()
    len_s_strip = len(s)
    quarter = (len_s - len_s_strip) // 4
    return ' ' * quarter + s


def exception_format():
    exc_text = format_exc()
    return [_lstrip_quarter(l.replace('"', '').replace("'", '').rstrip()) for l in exc_text.split('\n') if l]


def print_error(exception):
    """
    Prints the exception message as a single ERROR line to stdout.

    :param exception: The exception to print
    """

    print('ERROR: {}'.format(exception))


class ArgumentError(Exception):
    pass


class NodesError(Exception):
    pass


class ConfigMissing(NodesError):
    pass


class ConfigEmpty(NodesError):
    pass


class NoNodesDefined(NodesError):
    pass


class MalformedEntry(NodesError):
    pass


class UnknownHook(NodesError):
    pass


class InvalidAssignment(NodesError):
    pass
