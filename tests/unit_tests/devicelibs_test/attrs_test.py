import copy
import pickle
import unittest

from lvm2cmd.errors import AttributeDecodeError
from lvm2cmd.devicelibs import attrs
from lvm2cmd.devicelibs.attrs import AllocationPolicy, AllocationPolicyKind
from lvm2cmd.devicelibs.attrs import LVState, LVStatus, LVVolumeType, Permissions, VGAccessMode


class VariantTestCase(unittest.TestCase):

    def test_equality(self):
        self.assertEqual(LVVolumeType.Mirrored(initial_sync=True), LVVolumeType.Mirrored(True))
        self.assertNotEqual(LVVolumeType.Mirrored(initial_sync=True),
                            LVVolumeType.Mirrored(initial_sync=False))
        # same payload, different alternative
        self.assertNotEqual(LVVolumeType.Mirrored(initial_sync=True),
                            LVVolumeType.Raid(initial_sync=True))
        self.assertNotEqual(LVVolumeType.Simple(), LVState.Active())
        self.assertEqual(len({LVState.Active(), LVState.Active(), LVState.Inactive()}), 2)

    def test_payload(self):
        snap = LVVolumeType.Snapshot(merging=True)
        self.assertTrue(snap.merging)
        self.assertIsInstance(snap, LVVolumeType)
        self.assertIsInstance(snap, LVVolumeType.Snapshot)
        self.assertEqual(repr(snap), "LVVolumeType.Snapshot(merging=True)")
        self.assertEqual(repr(LVState.Active()), "LVState.Active()")

        with self.assertRaises(AttributeError):
            snap.merging = False
        with self.assertRaises(AttributeError):
            snap.foo  # pylint: disable=pointless-statement

    def test_bad_arguments(self):
        with self.assertRaises(TypeError):
            LVVolumeType.Mirrored()
        with self.assertRaises(TypeError):
            LVVolumeType.Mirrored(True, False)
        with self.assertRaises(TypeError):
            LVVolumeType.Simple(data=True)

    def test_copy(self):
        mirrored = LVVolumeType.Mirrored(initial_sync=True)
        for variant in (LVState.Active(), mirrored):
            self.assertEqual(copy.copy(variant), variant)
            self.assertEqual(copy.deepcopy(variant), variant)
            self.assertIs(type(copy.copy(variant)), type(variant))

        self.assertTrue(copy.deepcopy(mirrored).initial_sync)

    def test_pickle(self):
        for variant in (LVVolumeType.Simple(), LVVolumeType.ThinPool(data=True),
                        LVState.InvalidSnapshot(suspended=True)):
            restored = pickle.loads(pickle.dumps(variant))
            self.assertEqual(restored, variant)
            self.assertIs(type(restored), type(variant))
            self.assertEqual(repr(restored), repr(variant))

        attributes = attrs.decode_lv_attr("-wi-a-----")
        self.assertEqual(copy.deepcopy(attributes), attributes)
        self.assertEqual(pickle.loads(pickle.dumps(attributes)), attributes)


class LVAttrTestCase(unittest.TestCase):

    def test_decode_linear(self):
        attributes = attrs.decode_lv_attr("-wi-a-----")
        self.assertEqual(attributes.volume_type, LVVolumeType.Simple())
        self.assertEqual(attributes.permissions, Permissions.WRITEABLE)
        self.assertEqual(attributes.allocation_policy,
                         AllocationPolicy(AllocationPolicyKind.INHERITED, locked=False))
        self.assertFalse(attributes.is_fixed_minor)
        self.assertEqual(attributes.state, LVState.Active())
        self.assertEqual(attributes.status, LVStatus.CLOSED)

    def test_decode_exact_length(self):
        self.assertEqual(attrs.decode_lv_attr("-wi-a-"), attrs.decode_lv_attr("-wi-a-----"))

    def test_decode_others(self):
        attributes = attrs.decode_lv_attr("twLmSo")
        self.assertEqual(attributes.volume_type, LVVolumeType.ThinPool(data=False))
        self.assertEqual(attributes.allocation_policy,
                         AllocationPolicy(AllocationPolicyKind.CLING, locked=True))
        self.assertTrue(attributes.is_fixed_minor)
        self.assertEqual(attributes.state, LVState.InvalidSnapshot(suspended=True))
        self.assertEqual(attributes.status, LVStatus.OPEN)

        attributes = attrs.decode_lv_attr("Vrn-XX")
        self.assertEqual(attributes.volume_type, LVVolumeType.ThinVolume())
        self.assertEqual(attributes.permissions, Permissions.READ_ONLY)
        self.assertEqual(attributes.state, LVState.Unknown())
        self.assertEqual(attributes.status, LVStatus.UNKNOWN)

        attributes = attrs.decode_lv_attr("rRA-C-")
        self.assertEqual(attributes.volume_type, LVVolumeType.Raid(initial_sync=True))
        self.assertEqual(attributes.permissions, Permissions.READ_ONLY_ACTIVATION)
        self.assertEqual(attributes.allocation_policy,
                         AllocationPolicy(AllocationPolicyKind.ANYWHERE, locked=True))
        self.assertEqual(attributes.state, LVState.ThinPoolCheckNeeded(suspended=True))

    def test_volume_type_table(self):
        expected = {"R": LVVolumeType.Raid(initial_sync=False),
                    "s": LVVolumeType.Snapshot(merging=True),
                    "S": LVVolumeType.Snapshot(merging=False),
                    "O": LVVolumeType.Origin(merging_snapshot=True),
                    "I": LVVolumeType.MirrorOrRaid(out_of_sync=True),
                    "D": LVVolumeType.VDOPool(data=True),
                    "e": LVVolumeType.RaidOrPoolMetadataOrSpare()}
        for char, volume_type in expected.items():
            self.assertEqual(attrs.decode_lv_attr(char + "wi-a-").volume_type, volume_type, msg=char)

        # every code decodes to a distinct value
        values = list(attrs.LV_VOLUME_TYPE_CODES.values())
        self.assertEqual(len(values), len(set(values)))
        self.assertEqual(len(values), 22)

    def test_state_table(self):
        values = list(attrs.LV_STATE_CODES.values())
        self.assertEqual(len(values), len(set(values)))
        self.assertEqual(attrs.decode_lv_attr("-wi-M-").state, LVState.SnapshotMergeFailed(suspended=True))
        self.assertEqual(attrs.decode_lv_attr("-wi-i-").state, LVState.DevicePresentWithInactiveTables())

    def test_invalid_char(self):
        with self.assertRaises(AttributeDecodeError) as ctx:
            attrs.decode_lv_attr("-wi-Z-----")
        self.assertEqual(ctx.exception.field, "state")
        self.assertEqual(ctx.exception.char, "Z")

        for code, field in (("Zwi-a-", "volume type"),
                            ("-xi-a-", "permissions"),
                            ("-wq-a-", "allocation policy"),
                            ("-wiMa-", "fixed minor"),
                            ("-wi-a?", "status")):
            with self.assertRaisesRegex(AttributeDecodeError, field):
                attrs.decode_lv_attr(code)

        # a decode error is a ValueError
        self.assertRaises(ValueError, attrs.decode_lv_attr, "?")

    def test_too_short(self):
        with self.assertRaises(AttributeDecodeError) as ctx:
            attrs.decode_lv_attr("-wi-")
        self.assertEqual(ctx.exception.field, "state")
        self.assertIsNone(ctx.exception.char)
        self.assertIn("could not get state attribute", str(ctx.exception))

        with self.assertRaisesRegex(AttributeDecodeError, "volume type"):
            attrs.decode_lv_attr("")

    def test_not_a_string(self):
        self.assertRaises(TypeError, attrs.decode_lv_attr, None)
        self.assertRaises(TypeError, attrs.decode_vg_attr, 42)


class VGAttrTestCase(unittest.TestCase):

    def test_decode(self):
        attributes = attrs.decode_vg_attr("wz--n-")
        self.assertEqual(attributes.permissions, Permissions.WRITEABLE)
        self.assertTrue(attributes.is_resizeable)
        self.assertFalse(attributes.is_exported)
        self.assertFalse(attributes.is_partial)
        self.assertEqual(attributes.allocation_policy,
                         AllocationPolicy(AllocationPolicyKind.NORMAL, locked=False))
        self.assertEqual(attributes.access_mode, VGAccessMode.SINGLE_NODE)

        attributes = attrs.decode_vg_attr("r-xpCc")
        self.assertEqual(attributes.permissions, Permissions.READ_ONLY)
        self.assertFalse(attributes.is_resizeable)
        self.assertTrue(attributes.is_exported)
        self.assertTrue(attributes.is_partial)
        self.assertEqual(attributes.allocation_policy,
                         AllocationPolicy(AllocationPolicyKind.CONTIGUOUS, locked=True))
        self.assertEqual(attributes.access_mode, VGAccessMode.CLUSTERED)

        self.assertEqual(attrs.decode_vg_attr("wz--ns").access_mode, VGAccessMode.SHARED)

    def test_errors(self):
        with self.assertRaises(AttributeDecodeError) as ctx:
            attrs.decode_vg_attr("wz--n")
        self.assertEqual(ctx.exception.field, "access mode")

        with self.assertRaises(AttributeDecodeError) as ctx:
            attrs.decode_vg_attr("wy--n-")
        self.assertEqual(ctx.exception.field, "resizeable")
        self.assertEqual(ctx.exception.char, "y")

        with self.assertRaisesRegex(AttributeDecodeError, "exported"):
            attrs.decode_vg_attr("wzp-n-")
        with self.assertRaisesRegex(AttributeDecodeError, "partial"):
            attrs.decode_vg_attr("wz-xn-")
