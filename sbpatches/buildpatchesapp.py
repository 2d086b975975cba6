# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

import sbpatches.log
from .args import ConfigBackedParser, add_generic_args, add_build_args
from .buildpatches import ConfigurationMissing, make_build_options, build_patches
from .utils import setup_std_streams


_description = ("Build Starbound json patch files from a mod's edited copy "
                "of the game assets.")


def options_from_args(args):
    """Turn parsed arguments into BuildOptions.

    Classification tables left unset fall back to the built-in defaults.
    """
    kwargs = dict(
        working_dir=args.working_dir,
        dest=args.dest,
        starbound_assets=args.starbound_assets,
        jobs=args.jobs,
    )
    for name in ('skip_extensions', 'copy_only_extensions', 'ignore_patterns'):
        value = getattr(args, name, None)
        if value is not None:
            kwargs[name] = value
    return make_build_options(**kwargs)


def main_build(args):
    """Main handler of build CLI, returns the process exit status."""
    try:
        options = options_from_args(args)
        result = build_patches(options)
    except ConfigurationMissing as e:
        sbpatches.log.error(str(e))
        return 2
    return 1 if result.failed else 0


def _build_arg_parser(prog='sbpatches-build'):
    """Creates an argument parser for the build command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_build_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_build(arguments)


if __name__ == "__main__":
    sys.exit(main())
