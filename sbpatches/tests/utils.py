# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import io
import json
import os
from contextlib import contextmanager

import pytest

from sbpatches import patch, diff
from sbpatches.diff_format import is_valid_patch, PatchOp
from sbpatches.diffing.comparing import values_equal


def assert_no_stale_targets(d):
    """No remove or replace may target a location removed earlier in the patch."""
    removed = set()
    for e in d:
        if e.op in (PatchOp.REMOVE, PatchOp.REPLACE):
            assert not any(e.path == r or e.path.startswith(r + "/") for r in removed), (
                "%s targets removed location" % e.path)
        if e.op == PatchOp.REMOVE:
            removed.add(e.path)
        elif e.op == PatchOp.ADD:
            removed.discard(e.path)


def check_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b)
    assert is_valid_patch(d)
    assert_no_stale_targets(d)
    result = patch(a, d)
    assert values_equal(result, b)
    assert result == b


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def write_json(filename, obj, header=None):
    """Write obj as a json asset, creating directories.

    header is written verbatim before the json text, e.g. a comment.
    """
    dirname = os.path.dirname(filename)
    if not os.path.exists(dirname):
        os.makedirs(dirname)
    with io.open(filename, 'w', encoding='utf-8') as f:
        if header:
            f.write(header)
        json.dump(obj, f, indent=2)


def write_bytes(filename, data):
    dirname = os.path.dirname(filename)
    if not os.path.exists(dirname):
        os.makedirs(dirname)
    with io.open(filename, 'wb') as f:
        f.write(data)


def read_patch(filename):
    with io.open(filename, 'rb') as f:
        return json.loads(f.read().decode('utf-8'))


_keys = ["a", "b", "c", "a/b", "c~d", "~1", "", "maxHealth", "tags"]
_strings = ["", "x", "hello", "// not a comment", "ümlaut"]
_numbers = [0, 1, -3, 2.5, 1.0, 100]


def random_primitive(rng):
    kind = rng.randrange(4)
    if kind == 0:
        return None
    elif kind == 1:
        return rng.choice([True, False])
    elif kind == 2:
        return rng.choice(_numbers)
    return rng.choice(_strings)


def random_document(rng, depth=3):
    "Build a random json document of limited depth."
    kind = rng.randrange(4) if depth > 0 else 0
    if kind == 1:
        return [random_document(rng, depth - 1) for _ in range(rng.randrange(5))]
    elif kind == 2:
        return {rng.choice(_keys): random_document(rng, depth - 1)
                for _ in range(rng.randrange(5))}
    return random_primitive(rng)


def mutate(rng, doc, depth=3):
    "Return a modified copy of doc, sharing most of its structure."
    if rng.random() < 0.1:
        return random_document(rng, depth)
    if isinstance(doc, dict):
        doc = copy.deepcopy(doc)
        for key in list(doc):
            r = rng.random()
            if r < 0.2:
                del doc[key]
            elif r < 0.5:
                doc[key] = mutate(rng, doc[key], depth - 1)
        if rng.random() < 0.5:
            doc[rng.choice(_keys)] = random_document(rng, depth - 1)
        return doc
    elif isinstance(doc, list):
        doc = [mutate(rng, x, depth - 1) if rng.random() < 0.3 else copy.deepcopy(x)
               for x in doc]
        r = rng.random()
        if r < 0.3:
            del doc[rng.randrange(len(doc) + 1):]
        elif r < 0.6:
            doc.extend(random_document(rng, depth - 1) for _ in range(rng.randrange(1, 4)))
        return doc
    elif rng.random() < 0.5:
        return random_primitive(rng)
    return doc


@contextmanager
def assert_clean_exit():
    """Assert that SystemExit is called with code=0"""
    with pytest.raises(SystemExit) as e:
        yield
    assert e.value.code == 0
