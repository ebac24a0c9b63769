# names.py
# Validated names and UUIDs of LVM resources.
#
# Copyright (C) 2026  Red Hat, Inc.
#
# This copyrighted material is made available to anyone wishing to use,
# modify, copy, or redistribute it subject to the terms and conditions of
# the GNU General Public License v.2, or (at your option) any later version.
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY expressed or implied, including the implied warranties of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.  You should have received a copy of the
# GNU General Public License along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
# 02110-1301, USA.  Any Red Hat trademarks that are incorporated in the
# source code or documentation are not subject to the GNU General Public
# License and may only be used or replicated with the express permission of
# Red Hat, Inc.
#

import re

from .errors import InvalidResourceNameError, InvalidResourceUUIDError

NAME_REGEX = re.compile(r'^[a-zA-Z0-9+_.\-]+$')
UUID_REGEX = re.compile(r'^[a-zA-Z0-9]{6}-([a-zA-Z0-9]{4}-){5}[a-zA-Z0-9]{6}$')


class _ValidatedString(str):

    pattern = None
    error = None

    def __new__(cls, value):
        if not isinstance(value, str) or not cls.pattern.fullmatch(value):
            raise cls.error(value)

        return super(_ValidatedString, cls).__new__(cls, value)

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, str.__repr__(self))

    def __str__(self):
        return str.__str__(self)


class ResourceName(_ValidatedString):
    """ The name of a volume group or a logical volume.

        Matches ^[a-zA-Z0-9+_.-]+$
    """
    pattern = NAME_REGEX
    error = InvalidResourceNameError


class ResourceUUID(_ValidatedString):
    """ An LVM UUID, e.g. 'abcdef-1234-5678-90ab-cdef-1234-567890'. """
    pattern = UUID_REGEX
    error = InvalidResourceUUIDError
