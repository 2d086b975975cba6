# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

import sbpatches.log
from .args import ConfigBackedParser, add_generic_args, add_filename_args
from .diffing import diff
from .utils import read_asset, write_patch_file, dumps_patch, setup_std_streams


_description = "Compute the json patch between two Starbound json assets."


def first_missing(filenames):
    "Return the first of filenames that does not exist, or None."
    for fn in filenames:
        if not os.path.exists(fn):
            return fn
    return None


def main_diff(args):
    """Main handler of diff CLI, returns the process exit status.

    The patch is written to args.out in the format of .patch files,
    or printed when no output file is given.
    """
    missing = first_missing([args.base, args.modified])
    if missing:
        print("Missing file {}".format(missing))
        return 1

    try:
        base = read_asset(args.base)
        modified = read_asset(args.modified)
    except OSError as e:
        sbpatches.log.error('failed to read json asset: %s', e)
        return 1
    except ValueError as e:
        sbpatches.log.error('failed to parse json asset: %s', e)
        return 1

    d = diff(base, modified)
    sbpatches.log.debug('%d operations from %s to %s', len(d), args.base, args.modified)

    if args.out:
        try:
            write_patch_file(args.out, d)
        except OSError as e:
            sbpatches.log.error('failed to write patch file: %s', e)
            return 1
    else:
        print(dumps_patch(d), end="")
    return 0


def _build_arg_parser(prog='sbpatches-diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["base", "modified"])
    parser.add_argument(
        '-o', '--out',
        default=None,
        help="if supplied, the patch is written to this file. "
             "Otherwise it is printed to the terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
