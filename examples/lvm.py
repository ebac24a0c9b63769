import sys

from lvm2cmd import LVMExecutor, VolumeGroup, LVCreateOptions, ResourceCapacity
from lvm2cmd.errors import ResourceNotFoundError
from lvm2cmd.util import set_up_logging

# usage: lvm.py VG
set_up_logging(console=True)
executor = LVMExecutor()

vg = VolumeGroup.from_id(executor, sys.argv[1])

try:
    # at least 100 MiB, rounded up to whole sectors
    opts = LVCreateOptions("example", ResourceCapacity.from_nearest(100 * 1024 ** 2),
                           tags=["lvm2cmd-example"])
    lv = vg.add_lv(opts)
    print(lv)

    lv.deactivate()
    print(lv.from_id(executor, vg.name, lv.name).attributes.state)
finally:
    try:
        vg.remove_lv("example")
    except ResourceNotFoundError:
        pass
