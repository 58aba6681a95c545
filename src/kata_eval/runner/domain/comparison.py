"""Deep equality used to decide whether a test case passed."""

from collections.abc import Mapping, Sequence

type Value = object

_TEXT_TYPES = (str, bytes, bytearray)


def deep_equals(actual: Value, expected: Value) -> bool:
    """
    Compare two values structurally rather than by identity.

    Sequences (list, tuple, range, array.array, ...) compare element-wise
    regardless of their concrete type, so a tuple answer matches a list
    reference. Mappings compare keys and recurse into values. A bool never
    equals a non-bool number, so returning 1 where True is expected fails.
    Everything else falls back to ==.
    """
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected

    if _is_sequence(actual) and _is_sequence(expected):
        if len(actual) != len(expected):
            return False
        return all(deep_equals(a, e) for a, e in zip(actual, expected))

    if isinstance(actual, Mapping) and isinstance(expected, Mapping):
        if actual.keys() != expected.keys():
            return False
        return all(deep_equals(actual[key], expected[key]) for key in expected)

    return bool(actual == expected)


def _is_sequence(value: Value) -> bool:
    if isinstance(value, _TEXT_TYPES):
        return False
    if isinstance(value, Sequence):
        return True
    # array.array is not registered as a Sequence.
    return hasattr(value, "typecode") and hasattr(value, "__len__")
