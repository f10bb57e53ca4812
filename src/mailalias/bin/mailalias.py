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

"""The 'mailalias' command."""

__all__ = [
    'main',
    ]


import os
import sys
import argparse

from mailalias.app.aliases import load_aliases
from mailalias.config import config
from mailalias.core.i18n import _
from mailalias.core.initialize import initialize_1, initialize_2
from mailalias.interfaces.aliases import AliasFileError, SomeIncludesFailed
from mailalias.model.table import TABLE_SHAPES
from mailalias.version import MAILALIAS_VERSION


VERBOSE_CONFIG = """\
[logging.aliases]
level: debug
"""

# Include failures are printed to stderr by the command itself, so the error
# log only goes to its file.
ERRORS_CONFIG = """\
[logging.error]
propagate: no
"""



def make_parser():
    """Create the argument parser for bin/mailalias."""
    parser = argparse.ArgumentParser(
        prog='mailalias',
        description=_("""\
        Read a sendmail style aliases file, expand all the :include:
        directives in it, and print the resulting aliases.
        """),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        '-v', '--version',
        action='version', version=MAILALIAS_VERSION,
        help=_('Print this version string and exit'))
    parser.add_argument(
        '-C', '--config',
        help=_("""\
        Configuration file to use.  If not given, the environment variable
        MAILALIAS_CONFIG_FILE is consulted and used if set.  If neither are
        given, a default configuration file is searched for."""))
    parser.add_argument(
        '-f', '--file',
        help=_("""\
        The aliases file to read.  If not given, the configured alias_file
        is used."""))
    parser.add_argument(
        '-s', '--shape',
        choices=sorted(TABLE_SHAPES),
        help=_("""\
        The alias table shape.  'list' prints the aliases in file order."""))
    parser.add_argument(
        '--first-wins',
        default=False, action='store_true',
        help=_("""\
        When an alias is defined more than once, keep the first definition
        instead of the last one."""))
    parser.add_argument(
        '-d', '--directory',
        help=_("""\
        The directory relative :include: file names are resolved against.
        Defaults to the current directory."""))
    parser.add_argument(
        '--verbose',
        default=False, action='store_true',
        help=_('Log the files being read to standard error.'))
    parser.add_argument(
        'names', nargs='*', metavar='NAME',
        help=_('Print only these aliases.'))
    return parser


def main(argv=None):
    """bin/mailalias"""
    parser = make_parser()
    args = parser.parse_args(argv)
    # Fall back to using the environment variable if -C is not given.
    config_file = (os.getenv('MAILALIAS_CONFIG_FILE')
                   if args.config is None
                   else os.path.abspath(os.path.expanduser(args.config)))
    initialize_1(config_file)
    config.push('errors', ERRORS_CONFIG)
    if args.verbose:
        config.push('verbose', VERBOSE_CONFIG)
    initialize_2()
    failed = None
    try:
        table = load_aliases(
            filename=args.file,
            shape=args.shape,
            duplicates=('first' if args.first_wins else None),
            directory=args.directory)
    except AliasFileError as error:
        parser.error(str(error))
        # Does not return.
    except SomeIncludesFailed as error:
        # The table is still filled in, the failed aliases only partially
        # expanded, so print it anyway.
        failed = error
        table = error.table
    if args.names:
        records = []
        for name in args.names:
            record = table.get(name)
            if record is None:
                parser.error(_('Unknown alias: $name'))
                # Does not return.
            records.append(record)
    else:
        records = list(table)
    for record in records:
        print('{0}: {1}'.format(record.name, record.expansion))
    if failed is not None:
        for name in sorted(failed.failures):
            print(failed.failures[name], file=sys.stderr)
        sys.exit(1)
