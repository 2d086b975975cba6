# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import sys

from ._version import __version__


# Command name -> module providing its main(args)
_command_modules = {
    "build": "sbpatches.buildpatchesapp",
    "diff": "sbpatches.sbdiffapp",
    "patch": "sbpatches.sbpatchapp",
}

COMMANDS = list(_command_modules)

HELP_MESSAGE_VERBOSE = ("Usage: sbpatches [OPTIONS]\n\n"
                        "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                        "Examples: sbpatches --version\n"
                        "          sbpatches build -h\n"
                        "          sbpatches build -w mymod -d dist -a unpacked\n"
                        "          sbpatches diff base.object modified.object\n"
                        "          sbpatches patch base.object modified.object.patch"
                        % ", ".join(COMMANDS))


def print_all_config():
    """Print the effective options of every command to stderr."""
    from .args import format_config_values, print_config
    from .config import build_config, entrypoint_configurables
    print('All available config options, and their current values:\n',
          file=sys.stderr)
    for entrypoint, cls in entrypoint_configurables.items():
        print_config(cls.__name__, format_config_values(build_config(entrypoint, True)))
        print('', file=sys.stderr)


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd, args = args[0], args[1:]
    if cmd in _command_modules:
        app = importlib.import_module(_command_modules[cmd])
        return app.main(args)

    if cmd == '--version':
        sys.exit(__version__)
    elif cmd in ('-h', '--help'):
        sys.exit(HELP_MESSAGE_VERBOSE)
    elif cmd == '--config':
        print_all_config()
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s." % (cmd, HELP_MESSAGE_VERBOSE))


if __name__ == "__main__":
    # This is triggered by "python -m sbpatches <args>"
    sys.exit(main_dispatch())
