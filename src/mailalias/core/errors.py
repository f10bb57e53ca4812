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

"""mailalias exceptions.

Most exceptions live in the interface module for their related interfaces.
Only the base classes are defined here.
"""

__all__ = [
    'MailAliasError',
    'MailAliasException',
    ]



# Base class for all exceptions raised in mailalias.
class MailAliasException(Exception):
    pass


class MailAliasError(MailAliasException):
    """Base class for all mailalias errors."""
    pass
