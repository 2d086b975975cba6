# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import op_add, op_remove, op_replace, validate_patch
from ..utils import join_pointer

from .comparing import node_kind, values_equal, ARRAY, OBJECT

__all__ = ["diff"]


def diff(a, b, path=""):
    """Compute the patch transforming json-like object a into b.

    Returns a list of RFC 6902 add, remove and replace entries,
    in the order they must be applied. Equal documents give an
    empty list.
    """
    d = diff_values(a, b, path=path)

    # We can turn this off for performance after the library has been well tested:
    validate_patch(d)

    return d


def diff_values(a, b, path=""):
    """Diff two document nodes found at the same pointer.

    Nested containers are walked with an explicit stack rather than
    by recursion, so the depth of a document is only limited by
    memory. Entries come out in pre-order, as described for
    diff_dicts and diff_lists.
    """
    d = []
    # Pending work, last item first: node pairs still to diff,
    # or entries to emit once the children before them are done
    stack = [(_NODE, (a, b, path))]
    while stack:
        tag, item = stack.pop()
        if tag == _EMIT:
            d.extend(item)
            continue
        before, children, after = _diff_node(*item)
        d.extend(before)
        if after:
            stack.append((_EMIT, after))
        stack.extend((_NODE, child) for child in reversed(children))
    return d


_NODE = "node"
_EMIT = "emit"


def _diff_node(a, b, path):
    """Diff a single node pair without descending into it.

    Returns the entries preceding the children, the (a, b, path)
    child pairs to diff in order, and the entries following them.
    """
    kind = node_kind(a)
    if kind != node_kind(b):
        # Partial recombination across a type change is meaningless,
        # the whole subtree is replaced
        return [op_replace(path, b)], [], []
    if kind == OBJECT:
        return _dict_parts(a, b, path)
    elif kind == ARRAY:
        return _list_parts(a, b, path)
    elif not values_equal(a, b):
        return [op_replace(path, b)], [], []
    return [], [], []


def _list_parts(a, b, path):
    n = min(len(a), len(b))
    children = [(a[i], b[i], join_pointer(path, i)) for i in range(n)]
    after = [op_add(join_pointer(path, i), b[i]) for i in range(n, len(b))]
    after.extend(op_remove(join_pointer(path, i)) for i in reversed(range(n, len(a))))
    return [], children, after


def _dict_parts(a, b, path):
    before = [op_remove(join_pointer(path, key)) for key in a if key not in b]
    before.extend(op_add(join_pointer(path, key), b[key]) for key in b if key not in a)
    children = [(a[key], b[key], join_pointer(path, key)) for key in a if key in b]
    return before, children, []


def diff_lists(a, b, path=""):
    """Compute diff of two lists by position.

    Items are compared index by index up to the shorter length,
    then trailing items of b are added in ascending index order,
    or trailing items of a are removed from the highest index
    down, so no removal shifts an index still pending removal.
    """
    if not isinstance(a, list) or not isinstance(b, list):
        raise TypeError('Arguments to diff_lists need to be lists, got %r and %r' % (a, b))
    return diff_values(a, b, path=path)


def diff_dicts(a, b, path=""):
    """Compute diff of two dicts.

    Keys only in a are removed, then keys only in b are added,
    then keys in both a and b are diffed recursively. Removals
    and recursion follow the key order of a, additions the key
    order of b, which makes the result deterministic.
    """
    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))
    return diff_values(a, b, path=path)
