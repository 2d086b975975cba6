# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Logging for the sbpatches commands, and the error raised for unusable patches."""

import logging


LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class PatchFormatError(ValueError):
    """A patch is malformed or cannot be applied to a document.

    path is the pointer of the offending entry, when known.
    """
    def __init__(self, message, path=None):
        super(PatchFormatError, self).__init__(message)
        self.path = path


def _as_level(level):
    # Level names as used on the command line and in config files
    if isinstance(level, str):
        return logging.getLevelName(level)
    return level


def init_logging(level=logging.INFO):
    """Sets up logging for sbpatches entry points.

    Installs the stderr handler of the root logger, once, and
    routes warnings through logging. level is a number or one
    of LOG_LEVELS.
    """
    logging.basicConfig(format=LOG_FORMAT, level=_as_level(level))
    logging.captureWarnings(True)


def set_log_level(level, set_main=True):
    """Set a log level for the sbpatches logger, and the root logger if set_main"""
    level = _as_level(level)
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('sbpatches')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
