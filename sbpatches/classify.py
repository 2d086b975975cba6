# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Decide what happens to each file of a mod's working tree.

Every file falls in exactly one category:

- SKIP: never copied nor diffed (disabled assets and other files
  that should not end up in a distributable mod),
- COPY_VERBATIM: shipped whole, either because it is not a json
  asset (images, sounds, scripts, ...) or because the base game
  has no counterpart to diff it against,
- DIFF: written as a json patch against the base game asset.
"""

import os


class Category:
    "Collection of valid file classifications."
    COPY_VERBATIM = "copy"
    SKIP = "skip"
    DIFF = "diff"


# Disabled assets exist in the unpacked game files, but patching
# a disabled file makes little sense
DEFAULT_SKIP_EXTENSIONS = (
    '.disabled',
    '.objectdisabled',
    '.ase',
)

# Formats that cannot be json patched, and a few special file names
DEFAULT_COPY_ONLY_EXTENSIONS = (
    '.md',
    '.png',
    '.PNG',
    '.wav',
    '.ogg',
    '.ttf',
    '.lua',
    '.txt',
    '.psd',
    '.pdn',
    '.broken',
    '.db',
    '_metadata',
    '.metadata',
    '.gitignore',
    '.git',
    '_previewimage',
)


def file_extension(relpath):
    """Return the extension of relpath, case preserved.

    Dotfiles like '.metadata' have no extension.
    """
    return os.path.splitext(os.path.basename(relpath))[1]


def classify(relpath, skip_extensions, copy_only_extensions, baseline_exists):
    """Classify a file of the working tree.

    Parameters:
        relpath: Path of the file relative to the working tree root
        skip_extensions: Extensions of files to leave out entirely
        copy_only_extensions: Extensions (or exact file names) of
            files that are copied and never diffed
        baseline_exists: Whether the base game assets have a file
            at the same relative path

    Matching is case sensitive. Skipping takes precedence over
    copying, and files without any extension are treated as json.
    """
    ext = file_extension(relpath)
    if ext and ext in skip_extensions:
        return Category.SKIP
    if (ext and ext in copy_only_extensions) or os.path.basename(relpath) in copy_only_extensions:
        return Category.COPY_VERBATIM
    if not baseline_exists:
        # A new file, nothing to diff against
        return Category.COPY_VERBATIM
    return Category.DIFF
