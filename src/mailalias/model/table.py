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

"""Alias tables: the set-shaped and the list-shaped implementations."""

__all__ = [
    'AliasRecord',
    'ListAliasTable',
    'SetAliasTable',
    'TABLE_SHAPES',
    'make_table',
    ]


from zope.interface import implementer

from mailalias.interfaces.aliases import IAliasRecord, IAliasTable



@implementer(IAliasRecord)
class AliasRecord:
    """See `IAliasRecord`."""

    def __init__(self, name, expansion):
        self.name = name
        self.expansion = expansion

    def __repr__(self):
        return '<AliasRecord {0}: {1!r}>'.format(self.name, self.expansion)



class _BaseAliasTable:
    """Behavior common to both table shapes."""

    def __contains__(self, name):
        """See `IAliasTable`."""
        return self.get(name) is not None

    def for_each(self, function):
        """See `IAliasTable`."""
        for record in self:
            record.expansion = function(record)


@implementer(IAliasTable)
class SetAliasTable(_BaseAliasTable):
    """A table keyed by alias name.

    Iteration order is not significant for this shape.
    """

    def __init__(self):
        self._records = {}

    def define(self, name, expansion):
        """See `IAliasTable`."""
        record = self._records.get(name)
        if record is None:
            self._records[name] = AliasRecord(name, expansion)
        else:
            record.expansion = expansion

    def get(self, name, default=None):
        """See `IAliasTable`."""
        return self._records.get(name, default)

    def __iter__(self):
        """See `IAliasTable`."""
        return iter(list(self._records.values()))

    def __len__(self):
        """See `IAliasTable`."""
        return len(self._records)


@implementer(IAliasTable)
class ListAliasTable(_BaseAliasTable):
    """An ordered table.

    Records are iterated in the order they were first defined.  Redefining
    an alias replaces its expansion but keeps the record in its place.
    """

    def __init__(self):
        self._records = []
        # Maps alias names to the records in the list above.
        self._index = {}

    def define(self, name, expansion):
        """See `IAliasTable`."""
        record = self._index.get(name)
        if record is None:
            record = AliasRecord(name, expansion)
            self._records.append(record)
            self._index[name] = record
        else:
            record.expansion = expansion

    def get(self, name, default=None):
        """See `IAliasTable`."""
        return self._index.get(name, default)

    def __iter__(self):
        """See `IAliasTable`."""
        return iter(list(self._records))

    def __len__(self):
        """See `IAliasTable`."""
        return len(self._records)



TABLE_SHAPES = {
    'list': ListAliasTable,
    'set': SetAliasTable,
    }


def make_table(shape):
    """Create an empty alias table of the given shape.

    :param shape: The table shape, either 'set' or 'list'.
    :type shape: string
    :return: The new table.
    :rtype: `IAliasTable`
    :raises ValueError: when the shape is unknown.
    """
    try:
        table_class = TABLE_SHAPES[shape]
    except KeyError:
        raise ValueError('Unknown alias table shape: {0}'.format(shape))
    return table_class()
