# Copyright (C) 2012 by the Free Software Foundation, Inc.
#
# This file is part of mailalias.
#
# mailalias is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# mailalias is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# mailalias.  If not, see <http://www.gnu.org/licenses/>.

"""Parse sendmail style alias files."""

__all__ = [
    'parse',
    'parse_file',
    ]


import re
import logging

from mailalias.config import config
from mailalias.interfaces.aliases import AliasFileError


log = logging.getLogger('mailalias.aliases')

# A record is an alias name at the start of a line, a colon, and the rest of
# the line.  Every following line that starts with whitespace continues the
# record.  Comment lines start with # and so can neither start nor continue a
# record.
RECORD_RE = re.compile(r"""
    ^(?P<name>[^#\n: \t]+)
    [ \t]*:[ \t]*
    (?P<expansion>.*(?:\n[ \t]+.*)*)
    """, re.MULTILINE | re.VERBOSE)



def parse(text):
    """Generate the alias records found in some alias file text.

    Records are generated in file order, duplicate names included.  The
    expansion is returned verbatim: continuation lines keep their newlines
    and their leading whitespace.  Lines which do not look like the start of
    a record are skipped.

    :param text: The alias file text.
    :type text: string
    :return: (name, expansion) pairs.
    :rtype: iterator of 2-tuples of strings
    """
    for mo in RECORD_RE.finditer(text):
        yield mo.group('name'), mo.group('expansion')


def parse_file(filename, encoding=None):
    """Read an alias file and return the records it contains.

    The whole file is read before this function returns; records are then
    generated lazily as with `parse()`.

    :param filename: The alias file path.
    :type filename: string
    :param encoding: The file's character set.  If not given, the configured
        encoding is used.
    :type encoding: string
    :return: (name, expansion) pairs.
    :rtype: iterator of 2-tuples of strings
    :raises AliasFileError: when the file cannot be opened or read.
    """
    if encoding is None:
        encoding = config.mailalias.encoding
    try:
        with open(filename, encoding=encoding) as fp:
            text = fp.read()
    except OSError as error:
        raise AliasFileError(filename, error.strerror) from error
    except UnicodeError as error:
        raise AliasFileError(filename, str(error)) from error
    log.debug('%s: read %d characters', filename, len(text))
    return parse(text)
