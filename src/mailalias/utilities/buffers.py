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

"""In-memory file buffers."""

__all__ = [
    'OpenBuffers',
    'scratch_buffer',
    ]


import os

from io import StringIO
from zope.interface import implementer

from mailalias.interfaces.aliases import IOpenBuffers



@implementer(IOpenBuffers)
class OpenBuffers:
    """Files the host already holds in memory, keyed by absolute path.

    When an `:include:` file is registered here, its in-memory content is
    used instead of the file on disk.
    """

    def __init__(self):
        self._buffers = {}

    def _key(self, path):
        return os.path.abspath(os.path.expanduser(path))

    def add(self, path, text):
        """Register (or replace) the content of an open file."""
        self._buffers[self._key(path)] = text

    def remove(self, path):
        """Forget an open file.

        :raises KeyError: when the file is not open.
        """
        del self._buffers[self._key(path)]

    def get(self, path):
        """See `IOpenBuffers`."""
        return self._buffers.get(self._key(path))

    def __contains__(self, path):
        """See `IOpenBuffers`."""
        return self._key(path) in self._buffers

    def __len__(self):
        return len(self._buffers)



class scratch_buffer:
    """Manage a temporary text buffer for the with statement.

    The buffer is closed when the with statement exits, whether or not an
    exception occurred.
    """

    def __init__(self):
        self._buffer = None

    def __enter__(self):
        assert self._buffer is None, 'Scratch buffer already in use'
        self._buffer = StringIO()
        return self._buffer

    def __exit__(self, *exc_info):
        assert self._buffer is not None, 'No scratch buffer'
        self._buffer.close()
        self._buffer = None
        # Do not suppress exceptions.
        return False
