# udev.py
# Querying the udev database for the block devices of logical volumes.
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

import os
import logging
import pyudev

log = logging.getLogger("lvm2cmd")


def device_to_dict(device):
    # only the properties are used, plus the sysfs identity
    result = dict(device.properties)
    result["SYS_NAME"] = device.sys_name
    result["SYS_PATH"] = device.sys_path
    return result


def get_device(device_node, context=None):
    """ Return the udev properties of the device at device_node.

        :param str device_node: path of a device node, e.g. /dev/vg/lv
        :keyword context: the :class:`pyudev.Context` to query
        :returns: the properties or None if udev does not know the device
        :rtype: dict or NoneType
    """
    if not device_node or not os.path.exists(device_node):
        return None

    if context is None:
        context = pyudev.Context()

    try:
        device = pyudev.Devices.from_device_file(context, device_node)
    except (pyudev.DeviceNotFoundError, ValueError) as e:
        log.error("udev lookup of %s failed: %s", device_node, e)
        return None

    return device_to_dict(device)


def device_is_dm_lvm(info):
    """ Return True if the device is a mapped LVM logical volume. """
    return info.get("DM_UUID", "").startswith("LVM-")


def device_get_lv_vg_name(info):
    return info.get("DM_VG_NAME")


def device_get_lv_name(info):
    return info.get("DM_LV_NAME")
