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

"""Interfaces for alias tables, alias parsing and include expansion."""

__all__ = [
    'AliasFileError',
    'IAliasRecord',
    'IAliasTable',
    'IIncludeExpander',
    'IOpenBuffers',
    'IncludeDepthError',
    'IncludeFileError',
    'IncludeLoopError',
    'SomeIncludesFailed',
    ]


from zope.interface import Attribute, Interface

from mailalias.core.errors import MailAliasError



class AliasFileError(MailAliasError, IOError):
    """An alias file could not be opened or read."""

    def __init__(self, filename, reason=None):
        super().__init__(filename)
        self.filename = filename
        self.reason = reason

    def __str__(self):
        if self.reason is None:
            return 'Cannot read alias file: {0}'.format(self.filename)
        return 'Cannot read alias file: {0} ({1})'.format(
            self.filename, self.reason)


class IncludeFileError(AliasFileError):
    """A file named by an `:include:` directive could not be read."""

    def __init__(self, filename, reason=None, partial=None):
        super().__init__(filename, reason)
        self.partial = partial

    def __str__(self):
        if self.reason is None:
            return 'Cannot read include file: {0}'.format(self.filename)
        return 'Cannot read include file: {0} ({1})'.format(
            self.filename, self.reason)


class IncludeLoopError(MailAliasError):
    """An `:include:` file ends up including itself."""

    def __init__(self, filename, chain, partial=None):
        super().__init__(filename)
        self.filename = filename
        self.chain = tuple(chain)
        self.partial = partial

    def __str__(self):
        return 'Include loop detected: {0}'.format(
            ' -> '.join(self.chain + (self.filename,)))


class IncludeDepthError(MailAliasError):
    """`:include:` files are nested too deeply."""

    def __init__(self, depth, partial=None):
        super().__init__(depth)
        self.depth = depth
        self.partial = partial

    def __str__(self):
        return 'Include files nested deeper than {0} levels'.format(
            self.depth)


class SomeIncludesFailed(MailAliasError):
    """Include expansion failed for some of the table's records."""

    def __init__(self, failures, table=None):
        super().__init__()
        # Map of alias name to the exception raised while expanding it.
        self.failures = failures
        self.table = table

    def __str__(self):
        return 'Include expansion failed for: {0}'.format(
            ', '.join(sorted(self.failures)))



class IAliasRecord(Interface):
    """A single alias definition."""

    name = Attribute("""The alias name.  This is the record's identity.""")

    expansion = Attribute(
        """The alias expansion.

        This is a string which may be rewritten in place, e.g. when
        `:include:` directives are expanded.
        """)



class IAliasTable(Interface):
    """Storage for alias records, at most one record per name."""

    def define(name, expansion):
        """Insert a new record or replace the expansion of an existing one.

        :param name: The alias name.
        :type name: string
        :param expansion: The alias expansion.
        :type expansion: string
        """

    def get(name, default=None):
        """Return the record with the given name.

        :param name: The alias name.
        :type name: string
        :param default: What to return when there is no such record.
        :return: The matching record or `default`.
        :rtype: `IAliasRecord`
        """

    def __contains__(name):
        """Is there a record with the given name?"""

    def for_each(function):
        """Replace the expansion of every record.

        :param function: Called with each record in turn; its return value
            becomes the record's new expansion.
        :type function: callable taking an `IAliasRecord`, returning a string
        """

    def __iter__():
        """Iterate over all the records in the table.

        The `expansion` attribute of each record may be replaced during
        iteration.  Whether the iteration order is meaningful depends on the
        shape of the table.
        """

    def __len__():
        """The number of records in the table."""



class IOpenBuffers(Interface):
    """The host's registry of files which are already open in memory."""

    def get(path):
        """Return the in-memory content of the file at `path`.

        :param path: The absolute file path.
        :type path: string
        :return: The buffer content, or None if the file is not open.
        :rtype: string
        """

    def __contains__(path):
        """Is the file at `path` open?"""



class IIncludeExpander(Interface):
    """Substitute the contents of `:include:` files into alias expansions."""

    def expand(expansion):
        """Expand all the `:include:` directives in an alias expansion.

        Each directive is replaced by the named file's content, folded into
        a single comma separated line.  Included files may include other
        files.

        :param expansion: The raw alias expansion.
        :type expansion: string
        :return: The expansion with no `:include:` directives left.
        :rtype: string
        :raises IncludeFileError: when an included file cannot be read.
        :raises IncludeLoopError: when a file includes itself.
        :raises IncludeDepthError: when includes are nested too deeply.
        """
