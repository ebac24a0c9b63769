# devices/lvm.py
# Logical volumes and volume groups as reported by lvm.
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

import functools

from .. import udev
from ..devicelibs import lvm
from ..devicelibs.attrs import decode_lv_attr, decode_vg_attr
from ..devicelibs.attrs import LogicalVolumeAttributes, VolumeGroupAttributes
from ..errors import ResourceNotFoundError
from ..names import ResourceName, ResourceUUID
from ..size import ResourceCapacity
from ..storage_log import log_method_call, log_method_return

import logging
log = logging.getLogger("lvm2cmd")


def _count(value):
    # lvm reports counters as strings
    count = int(value)
    if count < 0:
        raise ValueError("negative count: %s" % value)
    return count


class LVCreateOptions(object):
    """ Parameters of a new logical volume. """

    def __init__(self, name, capacity_bytes, activate=True, tags=None):
        """
            :param name: name of the new volume
            :type name: :class:`~.names.ResourceName` or str
            :param capacity_bytes: the capacity required
            :type capacity_bytes: :class:`~.size.ResourceCapacity` or int
            :keyword bool activate: whether the volume is active after creation
            :keyword tags: extra tags to add to the volume
            :type tags: list of str
        """
        self.name = ResourceName(name)
        self.capacity_bytes = ResourceCapacity(capacity_bytes)
        self.activate = activate
        self.tags = list(tags or [])


class VGCreateOptions(object):
    """ Parameters of a new volume group.

        Limits left as None are passed to lvm as 0, i.e. unlimited.
    """

    def __init__(self, name, is_clustered=None, max_logical_volumes=None,
                 max_physical_volumes=None):
        self.name = ResourceName(name)
        self.is_clustered = is_clustered
        self.max_logical_volumes = max_logical_volumes
        self.max_physical_volumes = max_physical_volumes


class LVMResource(object):

    """ Common base of the objects returned by lvm reports.

        A resource remembers the executor it was read with and uses it for
        all further operations. Once deleted, a resource refuses any other
        operation with :class:`~.errors.ResourceNotFoundError`.
    """

    def __init__(self, executor=None):
        self._executor = executor
        self._destroyed = False

    @property
    def id(self):
        raise NotImplementedError()

    @property
    def destroyed(self):
        return self._destroyed

    @property
    def executor(self):
        if self._executor is None:
            raise ValueError("%s is not bound to an executor" % self.id)
        return self._executor

    def _check_exists(self):
        if self._destroyed:
            raise ResourceNotFoundError(self.id)

    def _mark_destroyed(self):
        self._destroyed = True
        log.info("%s %s removed", self.__class__.__name__, self.id)

    @classmethod
    def _record(cls, executor):
        return functools.partial(cls.from_report, executor=executor)

    @classmethod
    def from_report(cls, data, executor=None):
        raise NotImplementedError()


class LogicalVolume(LVMResource):

    """ An LVM logical volume """

    def __init__(self, name, volume_group_name, capacity_bytes, attributes, path, uuid,
                 executor=None):
        """
            :param name: the volume's name within its group
            :type name: :class:`~.names.ResourceName` or str
            :param volume_group_name: the name of the containing group
            :type volume_group_name: :class:`~.names.ResourceName` or str
            :param capacity_bytes: the size of the volume
            :type capacity_bytes: :class:`~.size.ResourceCapacity` or int or str
            :param attributes: decoded or raw lv_attr
            :type attributes: :class:`~.devicelibs.attrs.LogicalVolumeAttributes` or str
            :param str path: the volume's device path
            :param uuid: the volume's UUID
            :type uuid: :class:`~.names.ResourceUUID` or str
            :keyword executor: the executor used for further operations
            :type executor: :class:`~.executor.LVMExecutor`
        """
        super(LogicalVolume, self).__init__(executor=executor)
        self._name = ResourceName(name)
        self._volume_group_name = ResourceName(volume_group_name)
        self._capacity_bytes = ResourceCapacity(capacity_bytes)
        if not isinstance(attributes, LogicalVolumeAttributes):
            attributes = decode_lv_attr(attributes)
        self._attributes = attributes
        self._path = str(path)
        self._uuid = ResourceUUID(uuid)

    @classmethod
    def from_report(cls, data, executor=None):
        """ Build a volume from one element of an 'lv' report array. """
        return cls(name=data["lv_name"],
                   volume_group_name=data["vg_name"],
                   capacity_bytes=data["lv_size"],
                   attributes=decode_lv_attr(data["lv_attr"]),
                   path=data["lv_path"],
                   uuid=data["lv_uuid"],
                   executor=executor)

    def __repr__(self):
        return ("LogicalVolume(%s, uuid=%s, size=%d, path=%s, attributes=%s)"
                % (self.id, self._uuid, self._capacity_bytes, self._path, self._attributes))

    name = property(lambda s: s._name)
    volume_group_name = property(lambda s: s._volume_group_name)
    capacity_bytes = property(lambda s: s._capacity_bytes)
    attributes = property(lambda s: s._attributes)
    path = property(lambda s: s._path)
    uuid = property(lambda s: s._uuid)

    @property
    def id(self):
        """ The 'vg/lv' pair lvm uses to address the volume. """
        return "%s/%s" % (self._volume_group_name, self._name)

    #
    # queries
    #
    @classmethod
    def from_id(cls, executor, volume_group, name):
        """ Get a volume from its volume group and name.

            :raises: :class:`~.errors.ResourceNotFoundError`
        """
        lv_id = "%s/%s" % (ResourceName(volume_group), ResourceName(name))
        log_method_call(cls, lv_id)
        args = lvm.lv_report_args(nolocking=executor.nolocking, extra=[lv_id])
        lvs = executor.report("lvs", args, lvm.LV_REPORT_KEY, cls._record(executor))
        if not lvs:
            raise ResourceNotFoundError(lv_id)

        return lvs[-1]

    @classmethod
    def from_uuid(cls, executor, uuid):
        """ Get a volume from its UUID.

            :raises: :class:`~.errors.ResourceNotFoundError`
        """
        uuid = ResourceUUID(uuid)
        log_method_call(cls, uuid)
        args = lvm.lv_report_args(nolocking=executor.nolocking, extra=lvm.uuid_selector(uuid))
        lvs = executor.report("lvs", args, lvm.LV_REPORT_KEY, cls._record(executor))
        if not lvs:
            raise ResourceNotFoundError(uuid)

        return lvs[-1]

    @classmethod
    def list_all(cls, executor):
        """ All volumes on the system, sorted by volume group and name. """
        return cls._list(executor, None)

    @classmethod
    def list_for_vg(cls, executor, volume_group):
        """ The volumes of one volume group, sorted by name. """
        return cls._list(executor, ResourceName(volume_group))

    @classmethod
    def _list(cls, executor, volume_group):
        log_method_call(cls, volume_group=volume_group)
        extra = [volume_group] if volume_group else None
        args = lvm.lv_report_args(nolocking=executor.nolocking, extra=extra, sort=lvm.LV_SORT_KEY)
        return executor.report("lvs", args, lvm.LV_REPORT_KEY, cls._record(executor))

    #
    # mutations
    #
    @classmethod
    def create(cls, executor, volume_group, opts):
        """ Create a volume and return it as lvm reports it afterwards.

            :param executor: the executor to run lvm with
            :type executor: :class:`~.executor.LVMExecutor`
            :param volume_group: the group to allocate the volume from
            :type volume_group: :class:`~.names.ResourceName` or str
            :param opts: the parameters of the new volume
            :type opts: :class:`LVCreateOptions`
            :rtype: :class:`LogicalVolume`
        """
        volume_group = ResourceName(volume_group)
        log_method_call(cls, volume_group, name=opts.name, size=opts.capacity_bytes)
        args = ["--activate", lvm.activation_arg(opts.activate),
                "--name", opts.name,
                "--size", opts.capacity_bytes.to_arg()]
        for tag in opts.tags:
            args.extend(["--addtag", tag])
        args.append(volume_group)

        executor.mutate("lvcreate", args)
        lv = cls.from_id(executor, volume_group, opts.name)
        log_method_return(cls, lv)
        return lv

    def delete(self):
        """ Remove the volume, deactivating it if needed.

            This fails if the volume is in use, e.g. mounted. The object
            cannot be used for anything afterwards.
        """
        self._check_exists()
        log_method_call(self, self.id)
        self.executor.mutate("lvremove", ["--force", self.id])
        self._mark_destroyed()

    def activate(self):
        self.set_activated(True)

    def deactivate(self):
        self.set_activated(False)

    def set_activated(self, should_activate):
        """ Change the activation of the volume.

            The attributes of this object are not updated; read the volume
            again to see its new state.
        """
        self._check_exists()
        log_method_call(self, self.id, activate=should_activate)
        self.executor.mutate("lvchange", ["--activate", lvm.activation_arg(should_activate), self.id])

    def udev_device(self, context=None):
        """ The udev properties of the volume's block device.

            :returns: the properties or None if the device is not present
            :rtype: dict or NoneType
        """
        self._check_exists()
        info = udev.get_device(self._path, context=context)
        if info is None:
            return None

        if not udev.device_is_dm_lvm(info):
            log.warning("%s is not an lvm device according to udev", self._path)
        elif (udev.device_get_lv_vg_name(info), udev.device_get_lv_name(info)) != \
                (self._volume_group_name, self._name):
            log.warning("udev reports %s as %s/%s", self._path,
                        udev.device_get_lv_vg_name(info), udev.device_get_lv_name(info))

        return info


class VolumeGroup(LVMResource):

    """ An LVM Volume Group """

    def __init__(self, name, uuid, capacity_bytes, lv_count, pv_count, snap_count,
                 space_free_bytes, attributes, executor=None):
        super(VolumeGroup, self).__init__(executor=executor)
        self._name = ResourceName(name)
        self._uuid = ResourceUUID(uuid)
        self._capacity_bytes = ResourceCapacity(capacity_bytes)
        self._lv_count = _count(lv_count)
        self._pv_count = _count(pv_count)
        self._snap_count = _count(snap_count)
        self._space_free_bytes = _count(space_free_bytes)
        if not isinstance(attributes, VolumeGroupAttributes):
            attributes = decode_vg_attr(attributes)
        self._attributes = attributes

    @classmethod
    def from_report(cls, data, executor=None):
        """ Build a group from one element of a 'vg' report array. """
        return cls(name=data["vg_name"],
                   uuid=data["vg_uuid"],
                   capacity_bytes=data["vg_size"],
                   lv_count=data["lv_count"],
                   pv_count=data["pv_count"],
                   snap_count=data["snap_count"],
                   space_free_bytes=data["vg_free"],
                   attributes=decode_vg_attr(data["vg_attr"]),
                   executor=executor)

    def __repr__(self):
        return ("VolumeGroup(%s, uuid=%s, size=%d, free=%d, lvs=%d, pvs=%d, attributes=%s)"
                % (self._name, self._uuid, self._capacity_bytes, self._space_free_bytes,
                   self._lv_count, self._pv_count, self._attributes))

    name = property(lambda s: s._name)
    uuid = property(lambda s: s._uuid)
    capacity_bytes = property(lambda s: s._capacity_bytes)
    lv_count = property(lambda s: s._lv_count)
    pv_count = property(lambda s: s._pv_count)
    snap_count = property(lambda s: s._snap_count)
    space_free_bytes = property(lambda s: s._space_free_bytes)
    attributes = property(lambda s: s._attributes)

    @property
    def id(self):
        return str(self._name)

    #
    # queries
    #
    @classmethod
    def from_id(cls, executor, name):
        """ Get a group by its name.

            :raises: :class:`~.errors.ResourceNotFoundError`
        """
        name = ResourceName(name)
        log_method_call(cls, name)
        args = lvm.vg_report_args(nolocking=executor.nolocking, extra=[name], sort=lvm.VG_SORT_KEY)
        vgs = executor.report("vgs", args, lvm.VG_REPORT_KEY, cls._record(executor))
        if not vgs:
            raise ResourceNotFoundError(name)

        return vgs[-1]

    @classmethod
    def from_uuid(cls, executor, uuid):
        uuid = ResourceUUID(uuid)
        log_method_call(cls, uuid)
        args = lvm.vg_report_args(nolocking=executor.nolocking, extra=lvm.uuid_selector(uuid))
        vgs = executor.report("vgs", args, lvm.VG_REPORT_KEY, cls._record(executor))
        if not vgs:
            raise ResourceNotFoundError(uuid)

        return vgs[-1]

    @classmethod
    def list_all(cls, executor):
        """ All volume groups on the system, sorted by name. """
        log_method_call(cls)
        args = lvm.vg_report_args(nolocking=executor.nolocking, sort=lvm.VG_SORT_KEY)
        return executor.report("vgs", args, lvm.VG_REPORT_KEY, cls._record(executor))

    def list_lvs(self):
        self._check_exists()
        return LogicalVolume.list_for_vg(self.executor, self._name)

    #
    # mutations
    #
    @classmethod
    def create(cls, executor, physical_devices, opts):
        """ Create a group from physical devices and return it as lvm reports it.

            :param executor: the executor to run lvm with
            :type executor: :class:`~.executor.LVMExecutor`
            :param physical_devices: paths of the member devices
            :type physical_devices: list of str
            :param opts: the parameters of the new group
            :type opts: :class:`VGCreateOptions`
            :rtype: :class:`VolumeGroup`
        """
        log_method_call(cls, opts.name, devices=physical_devices)
        args = []
        if opts.is_clustered is not None:
            args.extend(["--clustered", "y" if opts.is_clustered else "n"])
        args.extend(["--maxlogicalvolumes", str(opts.max_logical_volumes or 0),
                     "--maxphysicalvolumes", str(opts.max_physical_volumes or 0),
                     opts.name])
        args.extend(physical_devices)

        executor.mutate("vgcreate", args)
        vg = cls.from_id(executor, opts.name)
        log_method_return(cls, vg)
        return vg

    def add_lv(self, opts):
        """ Create a logical volume in this group.

            :param opts: the parameters of the new volume
            :type opts: :class:`LVCreateOptions`
            :rtype: :class:`LogicalVolume`
        """
        self._check_exists()
        return LogicalVolume.create(self.executor, self._name, opts)

    def remove_lv(self, name):
        """ Remove the logical volume called name from this group. """
        self._check_exists()
        LogicalVolume.from_id(self.executor, self._name, name).delete()

    def delete(self):
        """ Remove the volume group. The object cannot be used afterwards. """
        self._check_exists()
        log_method_call(self, self.id)
        self.executor.mutate("vgremove", ["--force", self.id])
        self._mark_destroyed()
