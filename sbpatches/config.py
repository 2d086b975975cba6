"""Options of the sbpatches commands, with defaults overridable from json files.

Each command has a configurable class. Its options are the config
traits of the class and of its bases, so options shared by several
commands can be set once on a common base, e.g.::

    {
        "Global": {"log_level": "WARN"},
        "SbBuild": {"dest": "dist", "jobs": 4}
    }

in a sbpatches_config.json file of the current directory or of
~/.sbpatches. Files in the current directory take precedence.
"""

import os

from traitlets import Unicode, Enum, Integer, List, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import LOG_LEVELS
from .classify import DEFAULT_SKIP_EXTENSIONS, DEFAULT_COPY_ONLY_EXTENSIONS


CONFIG_BASENAME = 'sbpatches_config'

USER_CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.sbpatches')


_instances = {}


class SbpatchesConfigurable(HasTraits):

    @classmethod
    def own_config(cls):
        """Current values of the config traits declared by cls itself, not by its bases."""
        if cls not in _instances:
            _instances[cls] = cls()
        instance = _instances[cls]
        return {name: getattr(instance, name)
                for name in cls.class_own_traits(config=True)}


def config_path():
    """Directories searched for config files, in descending priority order."""
    return [os.getcwd(), USER_CONFIG_DIR]


def merge_config(target, new, include_none):
    """Merge new into target, section by section.

    Unless include_none, a None value removes its key from target,
    and sections left empty are dropped.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            section = target.setdefault(key, {})
            merge_config(section, value, include_none)
            if not section and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def load_config_files(include_none=False):
    """Read and merge the config files found on config_path()."""
    merged = {}
    for directory in reversed(config_path()):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            found = loader.load_config()
        except ConfigFileNotFound:
            continue
        merge_config(merged, found, include_none)
    return merged


def build_config(entrypoint, include_none=False):
    """Effective options of an entry point.

    Going from the most basic configurable class to the entry point's
    own, each class contributes the defaults of its traits, then the
    section of the same name from the config files.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('No config defined for entry point %r, expected one of %s.' % (
            entrypoint, ', '.join(sorted(entrypoint_configurables))))

    disk_config = load_config_files(include_none)
    config = {}
    for cls in reversed(configurable.mro()):
        if issubclass(cls, SbpatchesConfigurable):
            merge_config(config, cls.own_config(), include_none)
            merge_config(config, disk_config.get(cls.__name__, {}), include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(SbpatchesConfigurable):

    log_level = Enum(
        LOG_LEVELS,
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Build(Global):

    working_dir = Unicode(
        None,
        allow_none=True,
        help="root of the mod's edited asset tree.",
    ).tag(config=True)

    dest = Unicode(
        None,
        allow_none=True,
        help="root under which patch files and copied files are written.",
    ).tag(config=True)

    starbound_assets = Unicode(
        None,
        allow_none=True,
        help="root of the unpacked, unmodified Starbound assets.",
    ).tag(config=True)

    skip_extensions = List(
        Unicode(),
        default_value=list(DEFAULT_SKIP_EXTENSIONS),
        help="extensions of files that are neither copied nor diffed.",
    ).tag(config=True)

    copy_only_extensions = List(
        Unicode(),
        default_value=list(DEFAULT_COPY_ONLY_EXTENSIONS),
        help="extensions (or exact file names) of files that are copied, never diffed.",
    ).tag(config=True)

    ignore_patterns = List(
        Unicode(),
        default_value=['.git'],
        help="glob patterns of file and directory names left out of the scan.",
    ).tag(config=True)

    jobs = Integer(
        1,
        help="number of files processed in parallel.",
    ).tag(config=True)


class Diff(Global):
    pass


class Patch(Global):
    pass


class SbBuild(Build):
    pass

class SbDiff(Diff):
    pass

class SbPatch(Patch):
    pass


entrypoint_configurables = {
    'sbpatches-build': SbBuild,
    'sbpatches-diff': SbDiff,
    'sbpatches-patch': SbPatch,
}
