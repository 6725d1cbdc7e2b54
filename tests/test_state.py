"""Tests for the state module."""

import itertools
import unittest

from pydenon.enums import MuteState, PowerState, ZonePower
from pydenon.state import DeviceStatus, StatusModel


class TestDeviceStatus(unittest.TestCase):
    """Tests for the DeviceStatus class."""

    def test_initial_state_is_unknown(self):
        """Test that a new status knows nothing."""
        status = DeviceStatus()
        self.assertIs(status.power, PowerState.UNKNOWN)
        self.assertIs(status.mute, MuteState.UNKNOWN)
        self.assertIsNone(status.master_volume)
        self.assertIsNone(status.input)
        self.assertIs(status.main_zone_power, ZonePower.UNKNOWN)

    def test_unknown_is_neither_condition(self):
        """Test that predicates are false for unknown fields."""
        status = DeviceStatus()
        self.assertFalse(status.is_on())
        self.assertFalse(status.is_standby())
        self.assertFalse(status.is_muted())
        self.assertFalse(status.is_unmuted())
        self.assertFalse(status.is_main_zone_on())
        self.assertFalse(status.is_main_zone_off())

    def test_predicates(self):
        """Test predicates derived from field values."""
        status = DeviceStatus(power=PowerState.ON, mute=MuteState.ON, main_zone_power=ZonePower.OFF)
        self.assertTrue(status.is_on())
        self.assertFalse(status.is_standby())
        self.assertTrue(status.is_muted())
        self.assertFalse(status.is_unmuted())
        self.assertTrue(status.is_main_zone_off())

    def test_copy_is_independent(self):
        """Test that a copy is not affected by later changes."""
        status = DeviceStatus(power=PowerState.ON, master_volume=30)
        snapshot = status.copy()
        status.power = PowerState.STANDBY
        status.master_volume = 50
        self.assertIs(snapshot.power, PowerState.ON)
        self.assertEqual(snapshot.master_volume, 30)

    def test_to_dict(self):
        status = DeviceStatus(input="DVD")
        self.assertEqual(status.to_dict()["input"], "DVD")


class TestStatusModel(unittest.TestCase):
    """Tests for StatusModel.decode."""

    def setUp(self):
        self.model = StatusModel()

    def test_decode_full_burst(self):
        """Test decoding one token of each class."""
        changed = self.model.decode(b"PWON\rMUOFF\rMV45\rSIAUX\rZMON\r")
        status = self.model.status
        self.assertIs(status.power, PowerState.ON)
        self.assertIs(status.mute, MuteState.OFF)
        self.assertEqual(status.master_volume, 45)
        self.assertEqual(status.input, "AUX")
        self.assertIs(status.main_zone_power, ZonePower.ON)
        self.assertEqual(changed, {"power", "mute", "master_volume", "input", "main_zone_power"})

    def test_decode_is_order_independent(self):
        """Test that token order across distinct classes does not matter."""
        tokens = [b"PWON", b"MUOFF", b"MV45", b"SIAUX"]
        for order in itertools.permutations(tokens):
            model = StatusModel()
            model.decode(b"\r".join(order) + b"\r")
            with self.subTest(order=order):
                self.assertIs(model.status.power, PowerState.ON)
                self.assertIs(model.status.mute, MuteState.OFF)
                self.assertEqual(model.status.master_volume, 45)
                self.assertEqual(model.status.input, "AUX")

    def test_partial_burst_preserves_prior_state(self):
        """Test that fields not in a burst keep their values."""
        self.model.decode(b"PWON\rMV30\r")
        changed = self.model.decode(b"MUOFF\r")
        status = self.model.status
        self.assertIs(status.power, PowerState.ON)
        self.assertEqual(status.master_volume, 30)
        self.assertIs(status.mute, MuteState.OFF)
        self.assertEqual(changed, {"mute"})

    def test_unknown_class_codes_are_ignored(self):
        """Test that unrecognised tokens do not break decoding."""
        changed = self.model.decode(b"MSSTEREO\rPWSTANDBY\rCVFL 50\rMUON\r")
        self.assertIs(self.model.status.power, PowerState.STANDBY)
        self.assertIs(self.model.status.mute, MuteState.ON)
        self.assertEqual(changed, {"power", "mute"})

    def test_empty_tokens_are_skipped(self):
        """Test consecutive terminators and an empty burst."""
        self.assertEqual(self.model.decode(b""), set())
        self.model.decode(b"\r\rPWON\r\r")
        self.assertIs(self.model.status.power, PowerState.ON)

    def test_unterminated_last_token_is_decoded(self):
        self.model.decode(b"MUON")
        self.assertIs(self.model.status.mute, MuteState.ON)

    def test_unchanged_values_are_not_reported(self):
        """Test that restating a known value is not a change."""
        self.model.decode(b"PWON\r")
        self.assertEqual(self.model.decode(b"PWON\r"), set())

    def test_master_volume_payloads(self):
        """Test numeric, half-step and malformed volume payloads."""
        self.model.decode(b"MV45\r")
        self.assertEqual(self.model.status.master_volume, 45)

        self.model.decode(b"MV505\r")
        self.assertEqual(self.model.status.master_volume, 50)

        for payload in (b"MVMAX 98\r", b"MVabc\r", b"MV\r", b"MV?\r", b"MV1234\r",
                        b"MV00\r", b"MV99\r", b"MV995\r"):
            self.model.decode(payload)
            with self.subTest(payload=payload):
                self.assertEqual(self.model.status.master_volume, 50)

    def test_unrecognised_payloads_leave_fields_unchanged(self):
        """Test echoes and unexpected payloads for known classes."""
        self.model.decode(b"PWON\rMUOFF\rZMON\r")
        changed = self.model.decode(b"PW?\rMUMAYBE\rZMSTANDBY\rSI\r")
        self.assertEqual(changed, set())
        self.assertIs(self.model.status.power, PowerState.ON)
        self.assertIs(self.model.status.mute, MuteState.OFF)
        self.assertIs(self.model.status.main_zone_power, ZonePower.ON)
        self.assertIsNone(self.model.status.input)

    def test_input_is_stored_verbatim(self):
        self.model.decode(b"SISAT/CBL\r")
        self.assertEqual(self.model.status.input, "SAT/CBL")

    def test_non_ascii_bytes_do_not_raise(self):
        self.model.decode(b"\xff\xfe\rPWON\r")
        self.assertIs(self.model.status.power, PowerState.ON)

    def test_shared_status_object(self):
        """Test that the model mutates the status it was given."""
        status = DeviceStatus()
        model = StatusModel(status)
        model.decode(b"PWSTANDBY\r")
        self.assertTrue(status.is_standby())

    def test_snapshot(self):
        self.model.decode(b"MV20\r")
        snapshot = self.model.snapshot()
        self.model.decode(b"MV30\r")
        self.assertEqual(snapshot.master_volume, 20)


if __name__ == "__main__":
    unittest.main()
