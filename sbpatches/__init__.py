# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff
from .patching import patch
from .classify import Category, classify
from .buildpatches import (
    BuildResult, ConfigurationMissing, build_patches, make_build_options
)


__all__ = [
    "__version__",
    "diff", "patch",
    "Category", "classify",
    "BuildResult", "ConfigurationMissing", "build_patches", "make_build_options",
    ]
