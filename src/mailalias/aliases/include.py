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

"""Expand `:include:` directives in alias expansions."""

__all__ = [
    'IncludeExpander',
    'expand_includes',
    'fold',
    ]


import os
import re
import logging

from zope.interface import implementer

from mailalias.config import config
from mailalias.interfaces.aliases import (
    IIncludeExpander, IncludeDepthError, IncludeFileError, IncludeLoopError)
from mailalias.utilities.buffers import scratch_buffer


log = logging.getLogger('mailalias.aliases')

# The surrounding whitespace is part of the directive, so it is replaced too,
# but trailing whitespace stops at the end of the line so that the next
# continuation line is left alone.  Blanks may separate the keyword from the
# file name, which runs up to the next whitespace or comma.
INCLUDE_RE = re.compile(
    r'\s*:include:[ \t]*(?P<path>[^\s,]+)[ \t]*')

NL = '\n'
SPACE = ' '
INCLUDE_ERRORS = (IncludeDepthError, IncludeFileError, IncludeLoopError)



def fold(text):
    """Fold the lines of an included file into a single line.

    Trailing whitespace is stripped from every line and trailing blank lines
    are dropped.  The remaining lines are joined by a comma and a space, so
    that 'a\\nb\\nc\\n' becomes 'a, b, c'.

    :param text: The file content.
    :type text: string
    :return: The folded content.
    :rtype: string
    """
    lines = [line.rstrip() for line in text.split(NL)]
    while lines and not lines[-1]:
        lines.pop()
    with scratch_buffer() as fp:
        last = len(lines) - 1
        for lineno, line in enumerate(lines):
            fp.write(line)
            if lineno != last:
                fp.write(',' + NL)
        return fp.getvalue().replace(NL, SPACE)



@implementer(IIncludeExpander)
class IncludeExpander:
    """See `IIncludeExpander`."""

    def __init__(self, directory=None, buffers=None, max_depth=None,
                 encoding=None):
        """Create an expander.

        :param directory: The directory relative file names are resolved
            against.  If not given, the current working directory at
            expansion time is used.
        :type directory: string
        :param buffers: Files the host already holds in memory.  Their
            content is used instead of reading them from disk.
        :type buffers: `IOpenBuffers`
        :param max_depth: The maximum nesting of include files.  If not
            given, the configured value is used.
        :type max_depth: int
        :param encoding: The character set of the include files.  If not
            given, the configured encoding is used.
        :type encoding: string
        """
        self.directory = directory
        self.buffers = buffers
        self.max_depth = (config.max_include_depth
                          if max_depth is None
                          else max_depth)
        self.encoding = (config.mailalias.encoding
                         if encoding is None
                         else encoding)

    def resolve(self, path):
        """Turn an include file name into an absolute path.

        Tilde and $VARIABLE references are expanded first.
        """
        path = os.path.expandvars(os.path.expanduser(path))
        directory = (os.getcwd()
                     if self.directory is None
                     else os.path.expanduser(self.directory))
        return os.path.normpath(os.path.join(os.path.abspath(directory), path))

    def load(self, path):
        """Return the content of the file at the absolute `path`.

        An open buffer for the file is preferred over the file on disk.
        """
        if self.buffers is not None and path in self.buffers:
            log.debug('Using the open buffer for %s', path)
            return self.buffers.get(path)
        with open(path, encoding=self.encoding) as fp:
            return fp.read()

    def expand(self, expansion):
        """See `IIncludeExpander`."""
        return self._substitute(expansion, ())

    def _substitute(self, text, chain):
        # Replace the first directive and scan again from the start, until
        # there are no directives left.  `chain` is the tuple of files whose
        # content `text` came from, outermost first.
        while True:
            mo = INCLUDE_RE.search(text)
            if mo is None:
                return text
            try:
                content = self._include(mo.group('path'), chain)
            except INCLUDE_ERRORS as error:
                # A nested file's partial expansion is spliced in where its
                # directive was, as if it had been spliced before the failure.
                if error.partial is None:
                    error.partial = text
                else:
                    error.partial = (
                        text[:mo.start()] + error.partial + text[mo.end():])
                raise
            text = text[:mo.start()] + content + text[mo.end():]

    def _include(self, name, chain):
        path = self.resolve(name)
        if path in chain:
            raise IncludeLoopError(path, chain)
        if len(chain) >= self.max_depth:
            raise IncludeDepthError(self.max_depth)
        log.debug('Including %s', path)
        try:
            text = self.load(path)
        except OSError as error:
            raise IncludeFileError(path, error.strerror) from error
        except UnicodeError as error:
            raise IncludeFileError(path, str(error)) from error
        return self._substitute(fold(text), chain + (path,))



def expand_includes(expansion, **kws):
    """Expand the `:include:` directives in a single expansion.

    :param expansion: The raw alias expansion.
    :type expansion: string
    :param kws: Passed to the `IncludeExpander` constructor.
    :return: The fully expanded expansion.
    :rtype: string
    """
    return IncludeExpander(**kws).expand(expansion)
