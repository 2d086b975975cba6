# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import sys

import sbpatches.log
from .args import ConfigBackedParser, add_generic_args, add_filename_args
from .diff_format import to_patch_entries
from .log import PatchFormatError
from .patching import patch
from .sbdiffapp import first_missing
from .utils import read_asset, setup_std_streams


_description = "Apply a json patch from sbpatches diff to a Starbound json asset."


def load_patch_file(filename):
    """Read the entries of a .patch file.

    Raises ValueError if the file is not json, and PatchFormatError
    if it is not a list of objects.
    """
    with io.open(filename, encoding="utf-8-sig") as f:
        return to_patch_entries(json.load(f))


def main_patch(args):
    """Main handler of patch CLI, returns the process exit status."""
    missing = first_missing([args.base, args.patch])
    if missing:
        print("Missing file {}".format(missing))
        return 1

    try:
        before = read_asset(args.base)
        entries = load_patch_file(args.patch)
        after = patch(before, entries)
    except PatchFormatError as e:
        sbpatches.log.error('cannot apply %s to %s: %s', args.patch, args.base, e)
        return 1
    except OSError as e:
        sbpatches.log.error('failed to read input: %s', e)
        return 1
    except ValueError as e:
        sbpatches.log.error('failed to parse json: %s', e)
        return 1

    # Patched assets are plain json, without the CRLF convention of .patch files
    text = json.dumps(after, indent='\t', ensure_ascii=False)
    if args.output:
        try:
            with io.open(args.output, 'w', encoding='utf-8') as f:
                f.write(text + '\n')
        except OSError as e:
            sbpatches.log.error('failed to write patched asset: %s', e)
            return 1
    else:
        print(text)
    return 0


def _build_arg_parser(prog='sbpatches-patch'):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["base", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched asset is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
