# attrs.py
# Decoding of the lv_attr and vg_attr report fields.
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

"""
    LVM packs a number of independent facts about a volume or a volume
    group into one fixed-width string, e.g. "-wi-a-----" for lv_attr or
    "wz--n-" for vg_attr. Every position has its own alphabet. This module
    keeps one table per position mapping a character to its meaning and
    decodes the string strictly left to right. A character missing from
    a position's table is an error; so is a string that ends early.
"""

from collections import namedtuple
from enum import Enum

from ..errors import AttributeDecodeError

import logging
log = logging.getLogger("lvm2cmd")


class Variant(object):

    """ One alternative of a closed set of alternatives.

        Subclasses list their payload in :attr:`fields`. Instances are
        immutable and compare equal when both the alternative and the
        payload match.
    """

    __slots__ = ("_values",)
    fields = ()

    def __init__(self, *args, **kwargs):
        if len(args) > len(self.fields):
            raise TypeError("%s takes at most %d arguments" % (self._name(), len(self.fields)))

        values = dict(zip(self.fields, args))
        for key, value in kwargs.items():
            if key not in self.fields or key in values:
                raise TypeError("%s got an unexpected argument %r" % (self._name(), key))
            values[key] = value

        missing = [f for f in self.fields if f not in values]
        if missing:
            raise TypeError("%s is missing %s" % (self._name(), ", ".join(missing)))

        object.__setattr__(self, "_values", tuple(values[f] for f in self.fields))

    def __getattr__(self, name):
        fields = type(self).fields
        if name in fields:
            return self._values[fields.index(name)]
        raise AttributeError(name)

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self._name())

    # copy and pickle rebuild through __init__, never by setting slots
    def __reduce__(self):
        return (type(self), self._values)

    def __eq__(self, other):
        return type(self) is type(other) and self._values == other._values

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self._values))

    def __repr__(self):
        payload = ", ".join("%s=%r" % pair for pair in zip(self.fields, self._values))
        return "%s(%s)" % (self._name(), payload)

    @classmethod
    def _name(cls):
        return cls.__qualname__


def _add_variant(base, name, fields=()):
    cls = type(name, (base,), {"__slots__": (), "fields": tuple(fields)})
    cls.__qualname__ = "%s.%s" % (base.__name__, name)
    cls.__module__ = base.__module__
    setattr(base, name, cls)
    return cls


class LVVolumeType(Variant):
    """ The kind of a logical volume (lv_attr position 1). """
    __slots__ = ()


for _name, _fields in (("Simple", ()),
                       ("Cache", ()),
                       ("Mirrored", ("initial_sync",)),
                       ("Origin", ("merging_snapshot",)),
                       ("Raid", ("initial_sync",)),
                       ("Snapshot", ("merging",)),
                       ("PVMove", ()),
                       ("Virtual", ()),
                       ("MirrorOrRaid", ("out_of_sync",)),
                       ("MirrorLog", ()),
                       ("UnderConversion", ()),
                       ("ThinVolume", ()),
                       ("ThinPool", ("data",)),
                       ("VDOPool", ("data",)),
                       ("RaidOrPoolMetadataOrSpare", ())):
    _add_variant(LVVolumeType, _name, _fields)


class LVState(Variant):
    """ The activation state of a logical volume (lv_attr position 5). """
    __slots__ = ()


for _name, _fields in (("Unknown", ()),
                       ("Inactive", ()),
                       ("Active", ()),
                       ("Historical", ()),
                       ("Suspended", ()),
                       ("InvalidSnapshot", ("suspended",)),
                       ("SnapshotMergeFailed", ("suspended",)),
                       ("DevicePresentWithoutTables", ()),
                       ("DevicePresentWithInactiveTables", ()),
                       ("ThinPoolCheckNeeded", ("suspended",))):
    _add_variant(LVState, _name, _fields)

del _name, _fields


class Permissions(Enum):
    WRITEABLE = "w"
    READ_ONLY = "r"
    # read-only activation of a writeable volume
    READ_ONLY_ACTIVATION = "R"


class AllocationPolicyKind(Enum):
    ANYWHERE = "a"
    CONTIGUOUS = "c"
    INHERITED = "i"
    CLING = "l"
    NORMAL = "n"


AllocationPolicy = namedtuple("AllocationPolicy", ["policy", "locked"])
AllocationPolicy.__doc__ = """ An allocation policy; an uppercase code means it is locked. """


class LVStatus(Enum):
    CLOSED = "-"
    OPEN = "o"
    UNKNOWN = "X"


class VGAccessMode(Enum):
    SINGLE_NODE = "-"
    SHARED = "s"
    # usable only together with the cluster infrastructure
    CLUSTERED = "c"


LogicalVolumeAttributes = namedtuple("LogicalVolumeAttributes",
                                     ["volume_type", "permissions", "allocation_policy",
                                      "is_fixed_minor", "state", "status"])

VolumeGroupAttributes = namedtuple("VolumeGroupAttributes",
                                   ["permissions", "is_resizeable", "is_exported",
                                    "is_partial", "allocation_policy", "access_mode"])


def _enum_table(enum):
    return dict((member.value, member) for member in enum)


def _flag_table(char):
    return {"-": False, char: True}


PERMISSIONS_CODES = _enum_table(Permissions)

ALLOCATION_POLICY_CODES = {}
for _kind in AllocationPolicyKind:
    ALLOCATION_POLICY_CODES[_kind.value] = AllocationPolicy(_kind, False)
    ALLOCATION_POLICY_CODES[_kind.value.upper()] = AllocationPolicy(_kind, True)
del _kind

LV_VOLUME_TYPE_CODES = {
    "-": LVVolumeType.Simple(),
    "C": LVVolumeType.Cache(),
    "m": LVVolumeType.Mirrored(initial_sync=False),
    "M": LVVolumeType.Mirrored(initial_sync=True),
    "o": LVVolumeType.Origin(merging_snapshot=False),
    "O": LVVolumeType.Origin(merging_snapshot=True),
    "r": LVVolumeType.Raid(initial_sync=True),
    "R": LVVolumeType.Raid(initial_sync=False),
    "s": LVVolumeType.Snapshot(merging=True),
    "S": LVVolumeType.Snapshot(merging=False),
    "p": LVVolumeType.PVMove(),
    "v": LVVolumeType.Virtual(),
    "i": LVVolumeType.MirrorOrRaid(out_of_sync=False),
    "I": LVVolumeType.MirrorOrRaid(out_of_sync=True),
    "l": LVVolumeType.MirrorLog(),
    "c": LVVolumeType.UnderConversion(),
    "V": LVVolumeType.ThinVolume(),
    "t": LVVolumeType.ThinPool(data=False),
    "T": LVVolumeType.ThinPool(data=True),
    "d": LVVolumeType.VDOPool(data=False),
    "D": LVVolumeType.VDOPool(data=True),
    "e": LVVolumeType.RaidOrPoolMetadataOrSpare(),
}

LV_STATE_CODES = {
    "-": LVState.Inactive(),
    "a": LVState.Active(),
    "h": LVState.Historical(),
    "s": LVState.Suspended(),
    "I": LVState.InvalidSnapshot(suspended=False),
    "S": LVState.InvalidSnapshot(suspended=True),
    "m": LVState.SnapshotMergeFailed(suspended=False),
    "M": LVState.SnapshotMergeFailed(suspended=True),
    "d": LVState.DevicePresentWithoutTables(),
    "i": LVState.DevicePresentWithInactiveTables(),
    "c": LVState.ThinPoolCheckNeeded(suspended=False),
    "C": LVState.ThinPoolCheckNeeded(suspended=True),
    "X": LVState.Unknown(),
}

Field = namedtuple("Field", ["name", "attr", "codes"])

LV_ATTR_FIELDS = (
    Field("volume type", "volume_type", LV_VOLUME_TYPE_CODES),
    Field("permissions", "permissions", PERMISSIONS_CODES),
    Field("allocation policy", "allocation_policy", ALLOCATION_POLICY_CODES),
    Field("fixed minor", "is_fixed_minor", _flag_table("m")),
    Field("state", "state", LV_STATE_CODES),
    Field("status", "status", _enum_table(LVStatus)),
)

VG_ATTR_FIELDS = (
    Field("permissions", "permissions", PERMISSIONS_CODES),
    Field("resizeable", "is_resizeable", _flag_table("z")),
    Field("exported", "is_exported", _flag_table("x")),
    Field("partial", "is_partial", _flag_table("p")),
    Field("allocation policy", "allocation_policy", ALLOCATION_POLICY_CODES),
    Field("access mode", "access_mode", _enum_table(VGAccessMode)),
)


def decode_attr(code, fields, record):
    """ Decode an attribute string one character per field.

        :param str code: the attribute string as reported by lvm
        :param fields: the fields in the order of their positions
        :type fields: sequence of :class:`Field`
        :param record: called with the decoded values as keyword arguments
        :returns: whatever record returns
        :raises: :class:`~.errors.AttributeDecodeError`

        Characters after the last field are ignored.
    """
    if not isinstance(code, str):
        raise TypeError("attribute string expected, got %r" % (code,))

    chars = iter(code)
    values = {}
    for field in fields:
        char = next(chars, None)
        if char is None:
            raise AttributeDecodeError(field.name)

        try:
            values[field.attr] = field.codes[char]
        except KeyError:
            raise AttributeDecodeError(field.name, char) from None

    return record(**values)


def decode_lv_attr(code):
    """ Decode an lv_attr string, e.g. '-wi-a-----'.

        :rtype: :class:`LogicalVolumeAttributes`
    """
    log.debug("decoding lv_attr %r", code)
    return decode_attr(code, LV_ATTR_FIELDS, LogicalVolumeAttributes)


def decode_vg_attr(code):
    """ Decode a vg_attr string, e.g. 'wz--n-'.

        :rtype: :class:`VolumeGroupAttributes`
    """
    log.debug("decoding vg_attr %r", code)
    return decode_attr(code, VG_ATTR_FIELDS, VolumeGroupAttributes)
