"""Tests for printer port naming."""

import pytest

from receipt_bridge.utils.device import device_path_variants, normalize_port_name, unique


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("LPT1", "LPT1"), (" lpt2 ", "LPT2"), ("/dev/usb/lp1", "/dev/usb/lp1"), ("", None), (None, None)],
)
def test_normalize_port_name(raw, expected):
    assert normalize_port_name(raw) == expected


def test_windows_names_for_first_parallel_port():
    assert device_path_variants("LPT1", system="Windows") == ["\\\\.\\LPT1", "LPT1"]


def test_posix_names_for_first_parallel_port():
    assert device_path_variants("lpt1", system="Linux") == ["/dev/lp0", "/dev/usb/lp0"]


def test_second_port():
    assert device_path_variants("LPT2", system="Linux") == ["/dev/lp1", "/dev/usb/lp1"]


def test_explicit_path_is_used_as_is():
    assert device_path_variants("/dev/usb/lp3", system="Linux") == ["/dev/usb/lp3"]


def test_empty_port_has_no_variants():
    assert device_path_variants("  ") == []


def test_unique_preserves_order():
    assert unique(["/dev/lp0", None, " ", "/dev/usb/lp0", "/dev/lp0"]) == ["/dev/lp0", "/dev/usb/lp0"]
