import unittest

from lvm2cmd.devicelibs import lvm


class LVMArgsTestCase(unittest.TestCase):

    def test_report_args(self):
        self.assertEqual(lvm.lv_report_args(),
                         ["--nolocking", "--options", "+lv_all", "--units", "b", "--nosuffix"])
        self.assertEqual(lvm.vg_report_args(nolocking=False, extra=["vg0"], sort=lvm.VG_SORT_KEY),
                         ["--options", "+vg_all", "--units", "b", "--nosuffix", "--sort", "vg_name", "vg0"])

    def test_selector(self):
        self.assertEqual(lvm.uuid_selector("abcdef-1234-5678-90ab-cdef-1234-567890"),
                         ["--select", "uuid=abcdef-1234-5678-90ab-cdef-1234-567890"])

    def test_activation_arg(self):
        self.assertEqual(lvm.activation_arg(True), "ay")
        self.assertEqual(lvm.activation_arg(False), "n")
