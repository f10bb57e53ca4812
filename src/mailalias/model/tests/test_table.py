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

"""Test the alias table shapes."""

__all__ = [
    'TestListAliasTable',
    'TestMakeTable',
    'TestSetAliasTable',
    ]


import time
import unittest

from zope.interface.verify import verifyObject

from mailalias.interfaces.aliases import IAliasRecord, IAliasTable
from mailalias.model.table import (
    AliasRecord, ListAliasTable, SetAliasTable, make_table)



class _TableTests:
    """Tests common to both table shapes."""

    table_class = None

    def setUp(self):
        self._table = self.table_class()

    def test_verify_interface(self):
        self.assertTrue(verifyObject(IAliasTable, self._table))

    def test_empty(self):
        self.assertEqual(len(self._table), 0)
        self.assertEqual(list(self._table), [])
        self.assertFalse('root' in self._table)
        self.assertIsNone(self._table.get('root'))
        self.assertEqual(self._table.get('root', 'nobody'), 'nobody')

    def test_define(self):
        self._table.define('root', 'anne')
        self.assertEqual(len(self._table), 1)
        self.assertTrue('root' in self._table)
        record = self._table.get('root')
        self.assertTrue(verifyObject(IAliasRecord, record))
        self.assertEqual(record.name, 'root')
        self.assertEqual(record.expansion, 'anne')

    def test_last_definition_wins(self):
        self._table.define('root', 'anne')
        self._table.define('root', 'bart')
        self.assertEqual(len(self._table), 1)
        self.assertEqual(self._table.get('root').expansion, 'bart')

    def test_replace_during_iteration(self):
        self._table.define('root', 'anne')
        self._table.define('staff', 'bart')
        for record in self._table:
            record.expansion = record.expansion.upper()
        self.assertEqual(self._table.get('root').expansion, 'ANNE')
        self.assertEqual(self._table.get('staff').expansion, 'BART')

    def test_for_each(self):
        self._table.define('root', 'anne')
        self._table.define('staff', 'bart')
        self._table.for_each(
            lambda record: '{0} <{1}>'.format(record.expansion, record.name))
        self.assertEqual(self._table.get('root').expansion, 'anne <root>')
        self.assertEqual(self._table.get('staff').expansion, 'bart <staff>')

    def test_many_records(self):
        # Defining and looking up records does not slow down as the table
        # grows.
        start = time.monotonic()
        for i in range(20000):
            self._table.define('alias{0}'.format(i), 'anne')
        for i in range(20000):
            self._table.define('alias{0}'.format(i), 'bart')
        self.assertLess(time.monotonic() - start, 5)
        self.assertEqual(len(self._table), 20000)
        self.assertTrue('alias19999' in self._table)
        self.assertEqual(self._table.get('alias0').expansion, 'bart')


class TestSetAliasTable(_TableTests, unittest.TestCase):
    """Test the set-shaped table."""

    table_class = SetAliasTable

    def test_names(self):
        self._table.define('staff', 'bart')
        self._table.define('root', 'anne')
        self.assertEqual(sorted(record.name for record in self._table),
                         ['root', 'staff'])


class TestListAliasTable(_TableTests, unittest.TestCase):
    """Test the list-shaped table."""

    table_class = ListAliasTable

    def test_insertion_order(self):
        self._table.define('staff', 'bart')
        self._table.define('root', 'anne')
        self._table.define('abuse', 'cris')
        self.assertEqual([record.name for record in self._table],
                         ['staff', 'root', 'abuse'])

    def test_redefinition_keeps_position(self):
        self._table.define('staff', 'bart')
        self._table.define('root', 'anne')
        self._table.define('staff', 'cris')
        self.assertEqual(
            [(record.name, record.expansion) for record in self._table],
            [('staff', 'cris'), ('root', 'anne')])

    def test_many_records_keep_order(self):
        names = ['alias{0}'.format(i) for i in range(20000)]
        for name in reversed(names):
            self._table.define(name, 'anne')
        self._table.define(names[-1], 'bart')
        self.assertEqual([record.name for record in self._table],
                         list(reversed(names)))
        self.assertEqual(next(iter(self._table)).expansion, 'bart')



class TestMakeTable(unittest.TestCase):
    """Test creating tables by shape name."""

    def test_shapes(self):
        self.assertIsInstance(make_table('set'), SetAliasTable)
        self.assertIsInstance(make_table('list'), ListAliasTable)

    def test_unknown_shape(self):
        self.assertRaises(ValueError, make_table, 'tree')

    def test_record_repr(self):
        self.assertEqual(repr(AliasRecord('root', 'anne')),
                         "<AliasRecord root: 'anne'>")
