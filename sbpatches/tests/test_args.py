import json
import logging

import pytest
from traitlets import Enum

from sbpatches.args import ConfigBackedParser, LogLevelAction, add_build_args
from sbpatches.buildpatchesapp import _build_arg_parser, options_from_args
from sbpatches.classify import DEFAULT_SKIP_EXTENSIONS
from sbpatches.config import entrypoint_configurables, build_config, Global
from sbpatches.log import logger, set_log_level


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)

@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'


def test_config_parser_unknown_entrypoint():
    parser = ConfigBackedParser('not-an-entrypoint')
    add_build_args(parser)
    arguments = parser.parse_args(['-j', '3'])
    assert arguments.jobs == 3
    assert arguments.working_dir is None


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('not-an-entrypoint')


def test_build_config_file(tmpdir):
    tmpdir.join('sbpatches_config.json').write_text(
        json.dumps({
            'SbBuild': {
                'jobs': 3,
                'dest': 'out',
            },
            'Global': {
                'log_level': 'ERROR',
            },
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        config = build_config('sbpatches-build')
        parsed = _build_arg_parser().parse_args([])

    assert config['jobs'] == 3
    assert config['dest'] == 'out'
    assert config['log_level'] == 'ERROR'
    # Unset options are left out
    assert 'working_dir' not in config

    assert parsed.jobs == 3
    assert parsed.dest == 'out'
    assert parsed.working_dir is None


def test_command_line_overrides_config(tmpdir):
    tmpdir.join('sbpatches_config.json').write_text(
        json.dumps({
            'SbBuild': {
                'jobs': 3,
                'dest': 'out',
                'ignore_patterns': ['.git', '*.bak'],
            },
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        parsed = _build_arg_parser().parse_args(['-j', '1', '--dest', 'elsewhere'])

    assert parsed.jobs == 1
    assert parsed.dest == 'elsewhere'
    assert parsed.ignore_patterns == ['.git', '*.bak']


def test_log_level_from_config_file(tmpdir):
    tmpdir.join('sbpatches_config.json').write_text(
        json.dumps({'Global': {'log_level': 'WARN'}}),
        encoding='utf-8'
    )
    try:
        with tmpdir.as_cwd():
            parsed = _build_arg_parser().parse_args([])
            assert parsed.log_level == 'WARN'
            assert logger.level == logging.WARNING

            _build_arg_parser().parse_args(['--log-level', 'ERROR'])
            assert logger.level == logging.ERROR
    finally:
        set_log_level('INFO')


def test_config_inherit(tmpdir):
    tmpdir.join('sbpatches_config.json').write_text(
        json.dumps({
            'Build': {
                'copy_only_extensions': ['.png'],
            },
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        parsed = _build_arg_parser().parse_args([])

    assert parsed.copy_only_extensions == ['.png']


def test_options_from_args(tmpdir):
    with tmpdir.as_cwd():
        parsed = _build_arg_parser().parse_args(
            ['-w', 'mymod', '-d', 'dist', '-a', 'assets', '--copy-only-extensions', '.lua'])
        options = options_from_args(parsed)

    assert options.working_dir == str(tmpdir.join('mymod'))
    assert options.copy_only_extensions == frozenset(['.lua'])
    assert options.skip_extensions == frozenset(DEFAULT_SKIP_EXTENSIONS)
    assert options.jobs == 1
