#!/usr/bin/env python
"""Enumeration of the files making up a mod's working tree.

Does not follow directory symlinks.
"""

import os
from fnmatch import fnmatchcase

pjoin = os.path.join


def is_ignored(name, ignore_patterns):
    "Whether a file or directory base name matches any of the glob patterns."
    return any(fnmatchcase(name, pattern) for pattern in ignore_patterns)


def find_mod_files(root, ignore_patterns=()):
    """Return all files below root, as paths relative to root.

    Files and directories whose base name matches one of the glob
    style ignore_patterns are left out, including everything below
    an ignored directory. The list is sorted.

    Parameters:
    -----------
        root: Directory to enumerate
        ignore_patterns: Glob patterns, e.g. '*.disabled' or '.git'
    """
    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk does not descend into ignored directories
        dirnames[:] = [d for d in dirnames if not is_ignored(d, ignore_patterns)]
        for f in filenames:
            if not is_ignored(f, ignore_patterns):
                found.append(os.path.relpath(pjoin(dirpath, f), root))
    return sorted(found)
