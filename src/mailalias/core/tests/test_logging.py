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

"""Test the logging subsystem."""

__all__ = [
    'TestLogging',
    ]


import logging
import unittest

from mailalias.core.logging import initialize
from mailalias.testing.helpers import TemporaryFiles, configuration


SUB_NAMES = ('aliases', 'error')



class TestLogging(unittest.TestCase):
    """Test log initialization."""

    def setUp(self):
        self._files = TemporaryFiles()
        self._files.__enter__()
        self._config = configuration('paths', log_dir=self._files.directory)
        self._config.__enter__()

    def tearDown(self):
        for sub_name in SUB_NAMES:
            log = logging.getLogger('mailalias.' + sub_name)
            for handler in list(log.handlers):
                log.removeHandler(handler)
                handler.close()
            log.propagate = True
            log.setLevel(logging.NOTSET)
        self._config.__exit__(None, None, None)
        self._files.__exit__(None, None, None)

    def _read(self, name):
        with open(self._files.path(name), encoding='utf-8') as fp:
            return fp.read()

    def test_log_file(self):
        initialize(propagate=False)
        logging.getLogger('mailalias.error').error(
            'Cannot expand alias %s', 'root')
        self.assertIn('Cannot expand alias root', self._read('error.log'))

    def test_levels(self):
        initialize(propagate=False)
        self.assertEqual(logging.getLogger('mailalias.aliases').level,
                         logging.WARNING)
        self.assertEqual(logging.getLogger('mailalias.error').level,
                         logging.INFO)
        # Below the level, nothing is written.
        logging.getLogger('mailalias.aliases').info('Not logged')
        self.assertEqual(self._read('mailalias.log'), '')

    def test_propagation_from_configuration(self):
        initialize()
        self.assertTrue(logging.getLogger('mailalias.aliases').propagate)
        initialize(propagate=False)
        self.assertFalse(logging.getLogger('mailalias.aliases').propagate)

    def test_initialize_twice(self):
        initialize(propagate=False)
        initialize(propagate=False)
        log = logging.getLogger('mailalias.aliases')
        handlers = [handler for handler in log.handlers
                    if isinstance(handler, logging.FileHandler)]
        self.assertEqual(len(handlers), 1)
        self.assertEqual(handlers[0].baseFilename,
                         self._files.path('mailalias.log'))

    def test_no_log_directory(self):
        # Without a log directory, messages only go to the root logger.
        with configuration('paths', log_dir=''):
            initialize()
        log = logging.getLogger('mailalias.error')
        self.assertEqual(log.handlers, [])
        self.assertTrue(log.propagate)

    def test_no_log_directory_without_propagation(self):
        # Messages are dropped instead of reaching the last resort handler.
        with configuration('paths', log_dir=''):
            initialize(propagate=False)
        log = logging.getLogger('mailalias.error')
        self.assertEqual(len(log.handlers), 1)
        self.assertIsInstance(log.handlers[0], logging.NullHandler)

    def test_verbose_configuration(self):
        with configuration('logging.aliases', level='debug'):
            initialize(propagate=False)
        log = logging.getLogger('mailalias.aliases')
        self.assertEqual(log.level, logging.DEBUG)
        log.debug('Including %s', '/etc/staff')
        self.assertIn('Including /etc/staff', self._read('mailalias.log'))
