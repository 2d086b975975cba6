# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Turn a mod's working tree into patch files against the base game assets.

Each file of the working tree is handled on its own: it is skipped,
copied as is, or diffed against the file at the same relative path in
the unpacked Starbound assets, in which case the patch is written next
to where the copy would have gone, with a '.patch' suffix. A failure
on one file is logged and recorded, and processing goes on with the
next one.
"""

import os
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor
from functools import partial

import sbpatches.log
from .classify import (
    Category, classify, DEFAULT_SKIP_EXTENSIONS, DEFAULT_COPY_ONLY_EXTENSIONS
)
from .diffing import diff
from .files import find_mod_files
from .utils import read_asset, write_patch_file, copy_file


PATCH_SUFFIX = '.patch'


class ConfigurationMissing(ValueError):
    """A required option is missing or invalid, nothing has been processed."""
    pass


class FailureKind:
    "Collection of the ways processing a single file can fail."
    ASSET_READ = "AssetReadFailure"
    COPY = "CopyFailure"
    PATCH_WRITE = "PatchWriteFailure"


BuildOptions = namedtuple("BuildOptions", [
    "working_dir", "dest", "starbound_assets",
    "skip_extensions", "copy_only_extensions", "ignore_patterns", "jobs",
])


FileOutcome = namedtuple("FileOutcome", [
    "relpath", "category", "source", "asset", "dest", "error", "message",
])


_required_messages = (
    ('working_dir', 'working directory for mod MUST be specified'),
    ('dest', 'destination for patch files MUST be specified'),
    ('starbound_assets', 'location of unpacked Starbound asset files MUST be specified'),
)


def make_build_options(working_dir=None, dest=None, starbound_assets=None,
                       skip_extensions=DEFAULT_SKIP_EXTENSIONS,
                       copy_only_extensions=DEFAULT_COPY_ONLY_EXTENSIONS,
                       ignore_patterns=('.git',), jobs=1):
    """Validate options and return them as an immutable BuildOptions.

    Raises ConfigurationMissing if any of the three roots is not given.
    """
    given = dict(working_dir=working_dir, dest=dest, starbound_assets=starbound_assets)
    for name, message in _required_messages:
        if not given[name]:
            raise ConfigurationMissing(message)
    if jobs is None or jobs < 1:
        raise ConfigurationMissing('number of jobs must be at least 1, not %r' % (jobs,))
    return BuildOptions(
        working_dir=os.path.abspath(working_dir),
        dest=os.path.abspath(dest),
        starbound_assets=os.path.abspath(starbound_assets),
        skip_extensions=frozenset(skip_extensions),
        copy_only_extensions=frozenset(copy_only_extensions),
        ignore_patterns=tuple(ignore_patterns),
        jobs=jobs,
    )


class BuildResult(object):
    """The outcome of every processed file of a run.

    The run failed if any file failed.
    """

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)

    @property
    def failures(self):
        return [o for o in self.outcomes if o.error is not None]

    @property
    def failed(self):
        return any(o.error is not None for o in self.outcomes)

    @property
    def ok(self):
        return not self.failed

    def count(self, category):
        return sum(1 for o in self.outcomes if o.category == category and o.error is None)


def _copy_mod_file(outcome, new_file):
    try:
        copy_file(outcome.source, outcome.dest)
    except OSError as e:
        sbpatches.log.error('failed to copy mod file to %s: %s', outcome.dest, e)
        return outcome._replace(error=FailureKind.COPY, message=str(e))
    if new_file:
        sbpatches.log.info('asset %s does not exist in Starbound asset files, copied mod file to %s',
                           outcome.relpath, outcome.dest)
    else:
        sbpatches.log.info('copied mod file to %s', outcome.dest)
    return outcome._replace(message='copied')


def _diff_mod_file(outcome):
    try:
        original = read_asset(outcome.asset)
    except (OSError, ValueError, RecursionError) as e:
        sbpatches.log.error('failed to load %s from Starbound asset files: %s', outcome.relpath, e)
        return outcome._replace(error=FailureKind.ASSET_READ, message=str(e))
    try:
        modified = read_asset(outcome.source)
    except (OSError, ValueError, RecursionError) as e:
        sbpatches.log.error('failed to load %s from modded asset files: %s', outcome.source, e)
        return outcome._replace(error=FailureKind.ASSET_READ, message=str(e))

    d = diff(original, modified)
    try:
        write_patch_file(outcome.dest, d)
    except (OSError, RecursionError) as e:
        sbpatches.log.error('failed to write mod patch file to %s: %s', outcome.dest, e)
        return outcome._replace(error=FailureKind.PATCH_WRITE, message=str(e))
    sbpatches.log.info('created mod patch file at %s (%d operations)', outcome.dest, len(d))
    return outcome._replace(message='%d operations' % len(d))


def process_file(options, relpath):
    """Classify a single file of the working tree and copy or diff it.

    Returns a FileOutcome, with error set to a FailureKind if the file
    could not be processed. Never raises for per-file problems.
    """
    source = os.path.join(options.working_dir, relpath)
    asset = os.path.join(options.starbound_assets, relpath)
    baseline_exists = os.path.isfile(asset) and os.access(asset, os.R_OK)
    category = classify(relpath, options.skip_extensions,
                        options.copy_only_extensions, baseline_exists)

    outcome = FileOutcome(relpath=relpath, category=category, source=source,
                          asset=asset if baseline_exists else None,
                          dest=None, error=None, message=None)
    if category == Category.SKIP:
        sbpatches.log.debug('skipping %s', relpath)
        return outcome._replace(message='skipped')
    elif category == Category.COPY_VERBATIM:
        outcome = outcome._replace(dest=os.path.join(options.dest, relpath))
        return _copy_mod_file(outcome, new_file=not baseline_exists)
    else:
        outcome = outcome._replace(dest=os.path.join(options.dest, relpath + PATCH_SUFFIX))
        return _diff_mod_file(outcome)


def build_patches(options):
    """Process every file of the working tree described by options.

    Files are handled one at a time, or by a pool of options.jobs
    threads. Either way the returned BuildResult lists the outcomes
    in the sorted order of the relative paths.

    Raises ConfigurationMissing, before touching any file, if the
    working tree or the asset directory does not exist.
    """
    if not os.path.isdir(options.working_dir):
        raise ConfigurationMissing(
            'working directory %s does not exist' % options.working_dir)
    if not os.path.isdir(options.starbound_assets):
        raise ConfigurationMissing(
            'Starbound asset directory %s does not exist' % options.starbound_assets)

    relpaths = find_mod_files(options.working_dir, options.ignore_patterns)
    sbpatches.log.debug('found %d files in %s', len(relpaths), options.working_dir)

    if options.jobs > 1:
        with ThreadPoolExecutor(max_workers=options.jobs) as executor:
            outcomes = list(executor.map(partial(process_file, options), relpaths))
    else:
        outcomes = [process_file(options, relpath) for relpath in relpaths]

    result = BuildResult(outcomes)
    if result.failed:
        sbpatches.log.error('%d of %d files could not be processed',
                            len(result.failures), len(result.outcomes))
    else:
        sbpatches.log.info('processed %d files: %d patched, %d copied, %d skipped',
                           len(result.outcomes), result.count(Category.DIFF),
                           result.count(Category.COPY_VERBATIM), result.count(Category.SKIP))
    return result
