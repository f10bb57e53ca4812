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

"""Log set up for the mailalias command, from the [logging.*] sections."""

__all__ = [
    'initialize',
    ]


import os
import sys
import logging

from lazr.config import as_boolean, as_log_level

from mailalias.config import config


# The file handlers installed by initialize(), keyed by logger sub-name.
_handlers = {}



def _make_handler(logger_config):
    path = os.path.normpath(os.path.join(config.LOG_DIR, logger_config.path))
    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setFormatter(logging.Formatter(fmt=logger_config.format,
                                           datefmt=logger_config.datefmt))
    return handler


def initialize(propagate=None):
    """Initialize all logs.

    Messages always reach the root logger, which writes to stderr, unless
    propagation is turned off.  When a log directory is configured, each
    'mailalias.*' logger also writes to its own file in there.  Calling this
    again replaces the files of the previous call.

    :param propagate: Flag specifying whether logs should propagate their
        messages to the root logger.  If omitted, propagation is determined
        from the configuration files.
    :type propagate: bool or None
    """
    logging.basicConfig(format=config.logging.root.format,
                        datefmt=config.logging.root.datefmt,
                        level=as_log_level(config.logging.root.level),
                        stream=sys.stderr)
    if config.LOG_DIR is not None:
        os.makedirs(config.LOG_DIR, exist_ok=True)
    for logger_config in config.logger_configs:
        sub_name = logger_config.name.split('.')[-1]
        if sub_name == 'root':
            continue
        log = logging.getLogger('mailalias.' + sub_name)
        log.propagate = (as_boolean(logger_config.propagate)
                         if propagate is None else propagate)
        log.setLevel(as_log_level(logger_config.level))
        old_handler = _handlers.pop(sub_name, None)
        if old_handler is not None:
            log.removeHandler(old_handler)
            old_handler.close()
        if config.LOG_DIR is not None:
            handler = _make_handler(logger_config)
        elif not log.propagate:
            # Otherwise logging's last resort handler prints to stderr.
            handler = logging.NullHandler()
        else:
            continue
        _handlers[sub_name] = handler
        log.addHandler(handler)
