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

"""Configuration file loading and management."""

__all__ = [
    'Configuration',
    ]


import os

from contextlib import ExitStack
from importlib.resources import as_file, files
from lazr.config import ConfigSchema
from textwrap import dedent
from zope.interface import Interface, implementer



class IConfiguration(Interface):
    """Marker interface for the global configuration object."""



@implementer(IConfiguration)
class Configuration:
    """The core global configuration object."""

    def __init__(self):
        self._config = None
        self.filename = None
        self.LOG_DIR = None

    def __getattr__(self, name):
        """Delegate to the configuration object.

        The default configuration is loaded on first use, so library callers
        need not initialize anything before reading a setting.
        """
        if name.startswith('__'):
            raise AttributeError(name)
        if self._config is None:
            self.load()
        return getattr(self._config, name)

    def load(self, filename=None):
        """Load the configuration from the schema and config files."""
        with ExitStack() as resources:
            schema_path = resources.enter_context(
                as_file(files('mailalias.config') / 'schema.cfg'))
            schema = ConfigSchema(str(schema_path))
            # First, load the absolute minimum default configuration, then if
            # a configuration filename was given by the user, push it.
            config_path = resources.enter_context(
                as_file(files('mailalias.config') / 'mailalias.cfg'))
            self._config = schema.load(str(config_path))
        if filename is not None:
            self.filename = filename
            with open(filename, encoding='utf-8') as user_config:
                self._config.push(filename, user_config.read())
        self._post_process()

    def push(self, config_name, config_string):
        """Push a new configuration onto the stack."""
        if self._config is None:
            self.load()
        self._config.push(config_name, dedent(config_string))
        self._post_process()

    def pop(self, config_name):
        """Pop a configuration from the stack."""
        self._config.pop(config_name)
        self._post_process()

    def _post_process(self):
        """Perform post-processing after loading the configuration files."""
        log_dir = self._config.paths.log_dir
        self.LOG_DIR = (
            os.path.abspath(os.path.expandvars(os.path.expanduser(log_dir)))
            if log_dir else None)

    @property
    def logger_configs(self):
        """Return all log config sections."""
        if self._config is None:
            self.load()
        return self._config.getByCategory('logging', [])

    @property
    def alias_file(self):
        """The default alias file, with tilde and variables expanded."""
        return os.path.expandvars(
            os.path.expanduser(self.mailalias.alias_file))

    @property
    def max_include_depth(self):
        """The maximum nesting of `:include:` files, as an integer."""
        return int(self.mailalias.max_include_depth)
