# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from numbers import Number

__all__ = ["node_kind", "values_equal"]


NULL = "null"
BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"
ARRAY = "array"
OBJECT = "object"


def node_kind(x):
    """Return the json type name of a parsed document node.

    bool is checked before numbers since bool is an int subclass
    in Python, while json keeps them apart.
    """
    if x is None:
        return NULL
    elif isinstance(x, bool):
        return BOOLEAN
    elif isinstance(x, Number):
        return NUMBER
    elif isinstance(x, str):
        return STRING
    elif isinstance(x, list):
        return ARRAY
    elif isinstance(x, dict):
        return OBJECT
    raise TypeError("Not a json value: {!r}".format(x))


def values_equal(a, b):
    """Compare two document nodes type first, then by value.

    Numbers compare by value (1 == 1.0), objects by key set and
    values regardless of key order, arrays element by element.
    """
    kind = node_kind(a)
    if kind != node_kind(b):
        return False
    if kind == ARRAY:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    elif kind == OBJECT:
        return a.keys() == b.keys() and all(values_equal(a[k], b[k]) for k in a)
    return a == b
