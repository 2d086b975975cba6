# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def mod_dirs(tmpdir):
    """Fixture for an empty working tree, asset tree and destination.

    Returns the three directories as strings. The current directory is
    moved to tmpdir so no stray config file is picked up.
    """
    working = str(tmpdir.mkdir('mymod'))
    assets = str(tmpdir.mkdir('assets'))
    dest = str(tmpdir.join('dist'))
    with tmpdir.as_cwd():
        yield working, dest, assets


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)
