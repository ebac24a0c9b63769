# size.py
# Python module to represent LVM capacities.
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

from .errors import InvalidResourceCapacityError

SECTOR_SIZE = 512


def nearest_size_multiple(value):
    """ Return the smallest multiple of the sector size not below value.

        :param int value: a non-negative number of bytes
        :rtype: int
    """
    if value <= 0:
        return 0

    return ((value - 1) | (SECTOR_SIZE - 1)) + 1


def _to_int(value):
    # lvm reports numbers as strings with --nosuffix
    if isinstance(value, bool):
        raise InvalidResourceCapacityError(value)

    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            raise InvalidResourceCapacityError(value)

    if isinstance(value, int):
        return int(value)

    raise InvalidResourceCapacityError(value)


class ResourceCapacity(int):
    """ A capacity in bytes that LVM accepts.

        A valid capacity is a non-negative multiple of 512. Constructing
        a ResourceCapacity from any other value raises
        :class:`~.errors.InvalidResourceCapacityError`; use
        :meth:`from_nearest` to round a requested size up instead.
    """

    def __new__(cls, value=0):
        value = _to_int(value)
        if value < 0 or value != nearest_size_multiple(value):
            raise InvalidResourceCapacityError(value)

        return super(ResourceCapacity, cls).__new__(cls, value)

    @classmethod
    def from_nearest(cls, value):
        """ Create a capacity of at least value bytes.

            :param value: the requested number of bytes
            :type value: int or str
            :rtype: :class:`ResourceCapacity`
        """
        value = _to_int(value)
        if value < 0:
            raise InvalidResourceCapacityError(value)

        return cls(nearest_size_multiple(value))

    def __repr__(self):
        return "ResourceCapacity(%d)" % int(self)

    def __str__(self):
        return "%d" % int(self)

    @property
    def sectors(self):
        return int(self) // SECTOR_SIZE

    def to_arg(self):
        """ The capacity as an lvm size argument, e.g. '1048576B'. """
        return "%dB" % int(self)
