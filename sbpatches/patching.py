# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import re

from jsonpointer import JsonPointerException

from .diff_format import PatchOp, validate_patch_entry
from .log import PatchFormatError
from .utils import split_pointer


__all__ = ["patch"]


# Array indices in pointers are unsigned decimals without leading zeros
r_array_index = re.compile(r"^(0|[1-9][0-9]*)$")

# Pointer token referring to the position past the last array item
END_OF_ARRAY = "-"


def _list_index(obj, token, path, allow_end=False):
    if allow_end and token == END_OF_ARRAY:
        return len(obj)
    if not r_array_index.match(token):
        raise PatchFormatError("Invalid array index '{}' in '{}'.".format(token, path), path=path)
    index = int(token)
    limit = len(obj) if allow_end else len(obj) - 1
    if index > limit:
        raise PatchFormatError("Array index {} out of range in '{}'.".format(index, path), path=path)
    return index


def _resolve_parent(obj, path):
    "Walk all but the last token of path, returning (parent, last token)."
    try:
        parts = split_pointer(path)
    except JsonPointerException as err:
        raise PatchFormatError("Invalid JSON pointer '{}': {}".format(path, err), path=path)
    for token in parts[:-1]:
        if isinstance(obj, dict):
            if token not in obj:
                raise PatchFormatError("Member '{}' not found in '{}'.".format(token, path), path=path)
            obj = obj[token]
        elif isinstance(obj, list):
            obj = obj[_list_index(obj, token, path)]
        else:
            raise PatchFormatError(
                "Cannot resolve '{}' inside a {} in '{}'.".format(token, type(obj).__name__, path), path=path)
    return obj, parts[-1]


def patch_dict(obj, op, key, path, value):
    if op == PatchOp.ADD:
        obj[key] = copy.deepcopy(value)
    elif key not in obj:
        raise PatchFormatError("Cannot {} missing member '{}'.".format(op, path), path=path)
    elif op == PatchOp.REMOVE:
        del obj[key]
    else:
        obj[key] = copy.deepcopy(value)


def patch_list(obj, op, key, path, value):
    if op == PatchOp.ADD:
        obj.insert(_list_index(obj, key, path, allow_end=True), copy.deepcopy(value))
    elif op == PatchOp.REMOVE:
        del obj[_list_index(obj, key, path)]
    else:
        obj[_list_index(obj, key, path)] = copy.deepcopy(value)


def patch_entry(obj, e):
    """Apply a single patch entry to obj in place.

    Returns the patched document, which is a new object only when
    the entry targets the document root.
    """
    validate_patch_entry(e)
    op = e["op"]
    path = e["path"]
    if path == "":
        if op == PatchOp.REMOVE:
            raise PatchFormatError("Cannot remove the document root.", path="")
        return copy.deepcopy(e["value"])

    parent, key = _resolve_parent(obj, path)
    if isinstance(parent, dict):
        patch_dict(parent, op, key, path, e.get("value"))
    elif isinstance(parent, list):
        patch_list(parent, op, key, path, e.get("value"))
    else:
        raise PatchFormatError(
            "Cannot {} '{}' inside a {}.".format(op, path, type(parent).__name__), path=path)
    return obj


def patch(obj, diff):
    """Produce a patched version of obj with given list of patch entries.

    The entries are add, remove and replace operations as produced by
    diff, applied in order to a deep copy of obj, which is left untouched.

    Raises PatchFormatError if an entry is malformed or its pointer
    cannot be resolved in the document as patched so far.
    """
    newobj = copy.deepcopy(obj)
    for e in diff:
        newobj = patch_entry(newobj, e)
    return newobj
