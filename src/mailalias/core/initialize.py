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

"""Initialize all global state.

Every entrance into mailalias from the command line must call the
initialization functions here in order for the configuration and the logs
to be set up properly.  Library callers may skip them; the default
configuration is then loaded on first use and log messages go wherever the
host's logging sends them.
"""

__all__ = [
    'initialize_1',
    'initialize_2',
    'search_for_configuration_file',
    ]


import os

import mailalias.core.logging

from mailalias.config import config



def search_for_configuration_file():
    """Search the file system for a configuration file to use.

    This is only called if the -C command line argument was not given.
    """
    config_path = os.getenv('MAILALIAS_CONFIG_FILE')
    # Both None and the empty string are considered "missing".
    if config_path and os.path.exists(config_path):
        return os.path.abspath(config_path)
    # ./mailalias.cfg
    config_path = os.path.abspath('mailalias.cfg')
    if os.path.exists(config_path):
        return config_path
    # ~/.mailalias.cfg
    config_path = os.path.join(os.path.expanduser('~'), '.mailalias.cfg')
    if os.path.exists(config_path):
        return os.path.abspath(config_path)
    # /etc/mailalias.cfg
    config_path = '/etc/mailalias.cfg'
    if os.path.exists(config_path):
        return config_path
    return None



# These initialization calls are separated so that the command line script
# can push its own configuration overrides after the configuration files are
# loaded, but before the logs are set up.

def initialize_1(config_path=None):
    """First initialization step.

    * The configuration system

    :param config_path: The path to the configuration file.
    :type config_path: string
    """
    # config_path will be set if the command line argument -C is given.  That
    # case overrides all others.  When not given on the command line, the
    # configuration file is searched for in the file system.
    if config_path is None:
        config_path = search_for_configuration_file()
    config.load(config_path)


def initialize_2():
    """Second initialization step.

    * Logging
    """
    mailalias.core.logging.initialize()

