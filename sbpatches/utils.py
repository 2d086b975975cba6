# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import re
import shutil
import sys

from jsonpointer import JsonPointer


def join_pointer(path, key):
    """Append a single reference token to a JSON pointer.

    The token is escaped as RFC 6901 requires: '~' becomes '~0' and
    '/' becomes '~1'. Integer tokens (array indices) are allowed.
    """
    return path + JsonPointer.from_parts([key]).path


def split_pointer(path):
    "Split a JSON pointer on the form '/foo/b~1ar' into ['foo', 'b/ar']."
    return JsonPointer(path).parts


# A string literal, a line comment, or a block comment (possibly unterminated)
_json_tokens = re.compile(
    r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?(?:\*/|\Z)',
    re.DOTALL)
_not_newline = re.compile(r'[^\r\n]')


def _blank_comment(match):
    token = match.group(0)
    if token.startswith('"'):
        return token
    # Keep line breaks so parse errors still point at the right line
    return _not_newline.sub(' ', token)


def strip_json_comments(text):
    """Remove // and /* */ comments from json text.

    Comment markers inside string literals are left alone.
    """
    return _json_tokens.sub(_blank_comment, text)


def read_asset(filename):
    """Read and return the json document stored in filename.

    Asset files may contain comments, which are stripped before parsing.
    Raises OSError if the file cannot be read and ValueError
    if its content is not valid json.
    """
    with io.open(filename, encoding='utf-8-sig') as f:
        text = f.read()
    return json.loads(strip_json_comments(text))


def dumps_patch(patch):
    "Serialize patch entries the way they are stored in .patch files."
    return json.dumps(patch, indent='\t', ensure_ascii=False) + '\n'


def write_patch_file(filename, patch):
    """Write patch entries to filename as tab-indented json with CRLF line endings.

    The content is written to a temporary file next to the destination
    and moved into place, so a failed write never leaves a truncated
    patch file behind.
    """
    text = dumps_patch(patch)
    ensure_dir_exists(os.path.dirname(filename))
    tmpname = '%s.%d.tmp' % (filename, os.getpid())
    try:
        with io.open(tmpname, 'w', encoding='utf-8', newline='\r\n') as f:
            f.write(text)
        os.replace(tmpname, filename)
    except BaseException:
        if os.path.exists(tmpname):
            os.remove(tmpname)
        raise


def copy_file(source, dest):
    "Copy source to dest byte for byte, creating directories and overwriting dest."
    ensure_dir_exists(os.path.dirname(dest))
    shutil.copyfile(source, dest)


def ensure_dir_exists(path):
    "Create directory path and its parents if missing. An empty path is the cwd."
    if path:
        os.makedirs(path, exist_ok=True)


def setup_std_streams():
    """Make the console streams safe for printing json with non-ASCII text.

    Characters the console encoding cannot represent are escaped
    instead of raising, unless PYTHONIOENCODING is set or the stream
    has been replaced by the caller. On Windows, colorama is enabled
    after the streams are reconfigured so ANSI escapes keep working.
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            if stream is None or stream is not getattr(sys, '__%s__' % name):
                continue
            if (stream.errors or 'strict') in ('strict', 'surrogateescape'):
                stream.reconfigure(errors='backslashreplace')
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
