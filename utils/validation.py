from utils.errors import UsageError

QUIET_FLAGS = ("--quiet", "-q")
DEBUG_FLAGS = ("--debug",)

TRUE_VALUES = {"true", "1", "yes", "on", "t"}
FALSE_VALUES = {"false", "0", "no", "off", "f"}


def strip_flags(argv, flags):
    """Remove every occurrence of the given flags from an argument list.

    Parameters
    ----------
    argv : list[str]
        Raw command line arguments.
    flags : tuple[str]
        Flag spellings to remove, wherever they appear.

    Returns
    -------
    tuple[list[str], bool]
        The remaining arguments in their original order, and whether any
        of the flags was present.
    """
    remaining = []
    found = False
    for arg in argv:
        if arg in flags:
            found = True
            continue
        remaining.append(arg)
    return remaining, found


def strip_quiet(argv):
    """Remove ``--quiet``/``-q`` from any position."""
    return strip_flags(argv, QUIET_FLAGS)


def parse_bool(value):
    """Parse a boolean flag value such as ``--consent=true``.

    Raises
    ------
    ValueError
        If the value is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def require_value(value, flag):
    """Return ``value`` or raise UsageError naming the missing flag."""
    if value is None or str(value).strip() == "":
        raise UsageError(f"{flag} is required")
    return value
