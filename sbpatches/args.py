# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_log_level, LOG_LEVELS


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the config of its entry point.

    The entry point is the first word of prog. Parsers of unknown
    entry points keep their own defaults.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        namespace, extra = super(ConfigBackedParser, self).parse_known_args(
            args=args, namespace=namespace)
        # LogLevelAction only sees the level given on the command line,
        # a level from the config files applies once defaults are resolved
        level = getattr(namespace, "log_level", None)
        if level:
            set_log_level(level)
        return namespace, extra


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = default or 'INFO'
        init_logging(level=level)
        set_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_log_level(values, True)


def format_config_values(config):
    "json encode config values for display, showing empty sections as {}."
    formatted = {}
    for key, value in config.items():
        if isinstance(value, dict):
            formatted[key] = format_config_values(value) or '{}'
        else:
            formatted[key] = json.dumps(value)
    return formatted


def print_config(header, config, out=None):
    "Print the options of one configurable, one per line."
    if out is None:
        out = sys.stderr
    out.write('%s:\n' % header)
    for k, v in sorted(config.items()):
        out.write('  %s: %s\n' % (k, v))


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        print_config(header, format_config_values(config))
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all sbpatches commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_build_args(parser):
    """Adds the directories and classification tables used to build patches.
    """
    parser.add_argument(
        '-w', '--working-dir',
        dest='working_dir',
        default=None,
        help="root of the mod's edited asset tree.")
    parser.add_argument(
        '-d', '--dest',
        default=None,
        help="root under which patch files and copied files are written.")
    parser.add_argument(
        '-a', '--starbound-assets',
        dest='starbound_assets',
        default=None,
        help="root of the unpacked, unmodified Starbound assets.")
    parser.add_argument(
        '--skip-extensions',
        dest='skip_extensions',
        nargs='*',
        metavar='EXT',
        help="extensions of files that are neither copied nor diffed.")
    parser.add_argument(
        '--copy-only-extensions',
        dest='copy_only_extensions',
        nargs='*',
        metavar='EXT',
        help="extensions (or exact file names) of files that are copied, never diffed.")
    parser.add_argument(
        '--ignore',
        dest='ignore_patterns',
        nargs='*',
        metavar='PATTERN',
        help="glob patterns of file and directory names left out of the scan.")
    parser.add_argument(
        '-j', '--jobs',
        type=int,
        default=1,
        help="number of files processed in parallel.")


filename_help = {
    "base":     "The base (unmodified) json asset filename.",
    "modified": "The modified json asset filename.",
    "patch":    "The patch filename, output from sbpatches diff.",
    }


def add_filename_args(parser, names):
    """Add the base, modified and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])
