import inspect
import logging

log = logging.getLogger("lvm2cmd")
log.addHandler(logging.NullHandler())

IGNORED_FUNCS = ("_caller_and_depth", "log_method_call", "log_method_return")


def _caller_and_depth():
    stack = inspect.stack()
    for i, frame in enumerate(stack):
        if frame[3] not in IGNORED_FUNCS:
            return (frame[3], len(stack) - i)

    return ("unknown function?", 0)


def _owner_name(obj):
    # classmethods pass the class itself
    return obj.__name__ if inspect.isclass(obj) else obj.__class__.__name__


def log_method_call(obj, *args, **kwargs):
    """ Log a call of a method of obj together with its arguments.

        Nesting depth is shown by indentation so that an lvm query issued
        from inside a create operation reads as part of it.
    """
    (methodname, depth) = _caller_and_depth()
    fmt = "%s%s.%s:"
    fmt_args = [depth * ' ', _owner_name(obj), methodname]

    for arg in args:
        fmt += " %s ;"
        fmt_args.append(arg)

    for k, v in sorted(kwargs.items()):
        fmt += " %s: %s ;"
        fmt_args.extend([k, v])

    log.debug(fmt, *fmt_args)


def log_method_return(obj, retval):
    (methodname, depth) = _caller_and_depth()
    log.debug("%s%s.%s returned %s", depth * ' ', _owner_name(obj), methodname, retval)
