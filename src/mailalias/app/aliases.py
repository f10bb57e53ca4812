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

"""Building alias tables from alias files."""

__all__ = [
    'build_aliases',
    'expand_table',
    'first_wins',
    'load_aliases',
    ]


import logging

from mailalias.aliases.include import INCLUDE_ERRORS, IncludeExpander
from mailalias.aliases.parser import parse_file
from mailalias.config import config
from mailalias.interfaces.aliases import SomeIncludesFailed
from mailalias.model.table import make_table


log = logging.getLogger('mailalias.aliases')
elog = logging.getLogger('mailalias.error')



def first_wins(table):
    """Return a `define` callable which never replaces an existing alias.

    :param table: The alias table to define aliases in.
    :type table: `IAliasTable`
    :return: A callable taking the alias name and expansion.
    """
    def define(name, expansion):
        if name in table:
            log.debug('Ignoring redefinition of alias: %s', name)
        else:
            table.define(name, expansion)
    return define



def expand_table(table, expander=None):
    """Expand the `:include:` directives of every record in a table.

    The expansion of each record is replaced by the expanded one.  When
    expansion fails for a record, that record keeps its expansion as far as
    it got, and the remaining records are still expanded.

    :param table: The alias table.
    :type table: `IAliasTable`
    :param expander: The include expander.  If not given, an expander with
        the default settings is used.
    :type expander: `IIncludeExpander`
    :return: The table.
    :raises SomeIncludesFailed: after all the records have been processed,
        if expansion failed for any of them.
    """
    if expander is None:
        expander = IncludeExpander()
    failures = {}
    def expand(record):
        try:
            return expander.expand(record.expansion)
        except INCLUDE_ERRORS as error:
            elog.error('Cannot expand alias %s: %s', record.name, error)
            failures[record.name] = error
            return (record.expansion
                    if error.partial is None
                    else error.partial)
    table.for_each(expand)
    if failures:
        raise SomeIncludesFailed(failures, table)
    return table



def build_aliases(table, filename=None, define=None, expander=None,
                  encoding=None):
    """Read an alias file into a table and expand its `:include:` directives.

    :param table: The alias table to populate.
    :type table: `IAliasTable`
    :param filename: The alias file.  If not given, the configured alias
        file is used.
    :type filename: string
    :param define: Called with the name and expansion of every record, in
        file order.  This decides what happens to duplicate names.  If not
        given, `table.define` is used, so the last definition wins.
    :type define: callable
    :param expander: The include expander.  If not given, an expander with
        the default settings is used.
    :type expander: `IIncludeExpander`
    :param encoding: The alias file's character set.  If not given, the
        configured encoding is used.
    :type encoding: string
    :return: The table.
    :raises AliasFileError: when the alias file cannot be read.  The table
        is left untouched.
    :raises SomeIncludesFailed: when expansion failed for some records.  All
        the records are still defined.
    """
    if filename is None:
        filename = config.alias_file
    if define is None:
        define = table.define
    count = 0
    for name, expansion in parse_file(filename, encoding):
        define(name, expansion)
        count += 1
    log.info('%s: %d alias definitions read', filename, count)
    return expand_table(table, expander)


def load_aliases(filename=None, shape=None, duplicates=None, directory=None,
                 buffers=None, encoding=None):
    """Build a new alias table, using configured defaults.

    :param filename: The alias file.  If not given, the configured alias
        file is used.
    :type filename: string
    :param shape: The table shape, 'set' or 'list'.  If not given, the
        configured shape is used.
    :type shape: string
    :param duplicates: 'replace' if the last definition of an alias wins,
        'first' if the first one does.  If not given, the configured policy
        is used.
    :type duplicates: string
    :param directory: Relative include file names are resolved against this
        directory.  Defaults to the current working directory.
    :type directory: string
    :param buffers: Files the host already holds in memory.
    :type buffers: `IOpenBuffers`
    :param encoding: The character set of all the files read.
    :type encoding: string
    :return: The new table.
    :raises ValueError: for an unknown table shape or duplicates policy.
    """
    if shape is None:
        shape = config.mailalias.table_shape
    if duplicates is None:
        duplicates = config.mailalias.duplicates
    table = make_table(shape)
    if duplicates == 'replace':
        define = table.define
    elif duplicates == 'first':
        define = first_wins(table)
    else:
        raise ValueError('Unknown duplicates policy: {0}'.format(duplicates))
    expander = IncludeExpander(
        directory=directory, buffers=buffers, encoding=encoding)
    return build_aliases(table, filename, define, expander, encoding)
