from types import MappingProxyType


def freeze(value):
    """
    Recursively convert a parsed JSON value into a read-only equivalent

    dicts become MappingProxyType views over a private copy, lists become tuples.
    """
    if isinstance(value, dict):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(freeze(v) for v in value)
    return value


def read_first_line(path):
    """Read a small text file and return its first line without the newline"""
    with open(path, 'r', errors='replace') as f:
        return f.readline().rstrip('\n')
