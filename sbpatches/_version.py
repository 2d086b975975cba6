# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro"])

version_info = VersionInfo(1, 0, 0)

__version__ = "%d.%d.%d" % version_info
