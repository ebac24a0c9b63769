from lvm2cmd import LVMExecutor, VolumeGroup
from lvm2cmd.util import set_up_logging

set_up_logging()
executor = LVMExecutor()   # locate the lvm binary

for vg in VolumeGroup.list_all(executor):
    print(vg)
    for lv in vg.list_lvs():
        print("\t", lv.name, lv.capacity_bytes, lv.attributes.state, lv.attributes.status)
