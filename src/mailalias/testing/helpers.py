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

"""Various test helpers."""

__all__ = [
    'TemporaryFiles',
    'configuration',
    ]


import os
import shutil
import tempfile

from mailalias.config import config


NL = '\n'
_counter = 0



class configuration:
    """A decorator/context manager for temporarily setting configurations."""

    def __init__(self, section, **kws):
        global _counter
        self._section = section
        self._values = kws.copy()
        _counter += 1
        self._name = 'temporary config {0}'.format(_counter)

    def __enter__(self):
        lines = ['[{0}]'.format(self._section)]
        for key, value in self._values.items():
            lines.append('{0}: {1}'.format(key, value))
        config.push(self._name, NL.join(lines) + NL)
        return self

    def __exit__(self, *exc_info):
        config.pop(self._name)
        # Do not suppress exceptions.
        return False

    def __call__(self, func):
        def wrapper(*args, **kws):
            with self:
                return func(*args, **kws)
        wrapper.__name__ = func.__name__
        wrapper.__doc__ = func.__doc__
        return wrapper



class TemporaryFiles:
    """A temporary directory to write alias and include files into.

    Use this in a with statement; the directory and everything in it are
    removed when the with statement exits.
    """

    def __init__(self):
        self.directory = None

    def __enter__(self):
        assert self.directory is None, 'Temporary directory already exists'
        self.directory = tempfile.mkdtemp()
        return self

    def __exit__(self, *exc_info):
        shutil.rmtree(self.directory)
        self.directory = None
        # Do not suppress exceptions.
        return False

    def path(self, *parts):
        return os.path.join(self.directory, *parts)

    def write(self, name, text):
        """Write `text` to the file `name` and return the file's path."""
        path = self.path(name)
        directory = os.path.dirname(path)
        if not os.path.isdir(directory):
            os.makedirs(directory)
        with open(path, 'w', encoding='utf-8') as fp:
            fp.write(text)
        return path
