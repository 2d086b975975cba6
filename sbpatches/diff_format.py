# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsonpointer import JsonPointer, JsonPointerException

from .log import PatchFormatError


class PatchEntry(dict):
    """For internal usage in sbpatches library.

    Minimal class providing attribute access to patch entry keys.
    Being a plain dict otherwise, entries serialize directly to
    the RFC 6902 JSON Patch objects written to .patch files.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"


# Ops defined by RFC 6902 that are never produced here
UNSUPPORTED_OPS = ("move", "copy", "test")


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=path, value=value)


def to_patch_entries(obj):
    "Convert a loaded list of json objects to PatchEntry objects with attribute access."
    if not isinstance(obj, list):
        raise PatchFormatError("Patch must be a list, not {}.".format(type(obj).__name__))
    entries = []
    for e in obj:
        if not isinstance(e, dict):
            raise PatchFormatError("Patch entry '{}' is not an object.".format(e))
        entries.append(PatchEntry(e))
    return entries


def is_valid_patch(patch):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except PatchFormatError:
        return False
    return True


def validate_patch(patch):
    """Check whether a patch (list of patch entries) is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed add, remove or replace entry.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, dict):
        raise PatchFormatError("Patch entry '{}' is not an object.".format(e))

    op = e.get("op")
    if op in UNSUPPORTED_OPS:
        raise PatchFormatError("Patch op '{}' is not supported.".format(op))
    if op not in (PatchOp.ADD, PatchOp.REMOVE, PatchOp.REPLACE):
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    path = e.get("path")
    if not isinstance(path, str):
        raise PatchFormatError(
            "Patch entry path must be a string, not '{}'.".format(path))
    try:
        JsonPointer(path)
    except JsonPointerException as err:
        raise PatchFormatError(
            "Invalid JSON pointer '{}': {}".format(path, err), path=path)

    if op == PatchOp.REMOVE:
        if "value" in e:
            raise PatchFormatError("remove entry at '{}' cannot carry a value.".format(path), path=path)
    elif "value" not in e:
        raise PatchFormatError("{} entry at '{}' needs a value.".format(op, path), path=path)

    # Values are not checked, they can be arbitrary json objects
