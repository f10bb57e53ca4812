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

import re
import sys

from setuptools import setup, find_packages
from string import Template

if sys.hexversion < 0x30900f0:
    print('mailalias requires at least Python 3.9')
    sys.exit(1)


# Calculate the version number without importing the mailalias package.
with open('src/mailalias/version.py') as fp:
    for line in fp:
        mo = re.match("VERSION = '(?P<version>[^']+?)'", line)
        if mo:
            __version__ = mo.group('version')
            break
    else:
        print('No version number found')
        sys.exit(1)



template = Template('$script = mailalias.bin.$script:main')
scripts = set(
    template.substitute(script=script)
    for script in ('mailalias',)
    )



setup(
    name            = 'mailalias',
    version         = __version__,
    description     = 'mailalias -- read sendmail style alias files',
    long_description= """\
This is mailalias, a library and command line script which reads sendmail
style aliases(5) files into alias tables, expanding all the :include:
directives they contain.  It is distributed under the terms of the GNU
General Public License (GPL) version 3 or later.""",
    author          = 'The mailalias Developers',
    license         = 'GPLv3',
    keywords        = 'email',
    packages        = find_packages('src'),
    package_dir     = {'': 'src'},
    package_data    = {
        'mailalias.config': ['*.cfg'],
        },
    include_package_data = True,
    python_requires = '>=3.9',
    entry_points    = {
        'console_scripts' : list(scripts),
        },
    install_requires = [
        'flufl.i18n',
        'lazr.config',
        'zope.interface',
        ],
    extras_require  = {
        'test': [
            'pytest',
            ],
        },
    )
