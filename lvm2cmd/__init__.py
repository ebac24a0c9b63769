# __init__.py
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

__version__ = '0.3.0'

import logging
log = logging.getLogger("lvm2cmd")
log.addHandler(logging.NullHandler())
program_log = logging.getLogger("program")

from .errors import LVMError, LVMCommandError, LVMInternalError, MalformedOutputError
from .errors import ResourceNotFoundError, AttributeDecodeError
from .errors import InvalidResourceNameError, InvalidResourceUUIDError, InvalidResourceCapacityError
from .flags import flags
from .names import ResourceName, ResourceUUID
from .size import ResourceCapacity
from .executor import LVMExecutor
from .devices.lvm import LogicalVolume, VolumeGroup, LVCreateOptions, VGCreateOptions
