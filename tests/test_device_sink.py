"""Tests for writing to the printer port."""

import os

import pytest

from receipt_bridge.exceptions import DeviceUnavailableError, PartialWriteError
from receipt_bridge.services.device_sink import DeviceSink


def test_writes_to_first_path_that_opens(tmp_path, device_file):
    missing = tmp_path / "missing-lpt"
    sink = DeviceSink([str(missing), str(device_file)])

    used = sink.write(b"\x1b@Hello\n\n")

    assert used == str(device_file)
    assert device_file.read_bytes() == b"\x1b@Hello\n\n"
    assert not missing.exists()


def test_all_paths_failing_raises_device_unavailable(tmp_path):
    first, second = tmp_path / "LPT1", tmp_path / "lp0"
    sink = DeviceSink([str(first), str(second)])

    with pytest.raises(DeviceUnavailableError) as exc_info:
        sink.write(b"data")

    message = str(exc_info.value)
    assert str(first) in message
    assert str(second) in message
    assert not first.exists()
    assert not second.exists()


def test_no_paths_configured():
    with pytest.raises(DeviceUnavailableError, match="No printer device path"):
        DeviceSink([]).write(b"data")


def test_partial_write_is_reported(monkeypatch, device_file):
    monkeypatch.setattr(os, "write", lambda fd, data: len(data) - 1)

    with pytest.raises(PartialWriteError, match="accepted 3 of 4 bytes"):
        DeviceSink([str(device_file)]).write(b"data")


def test_handle_is_closed_when_write_fails(monkeypatch, device_file):
    closed = []
    real_close = os.close

    def failing_write(fd, data):
        raise OSError(5, "Input/output error")

    def recording_close(fd):
        closed.append(fd)
        real_close(fd)

    monkeypatch.setattr(os, "write", failing_write)
    monkeypatch.setattr(os, "close", recording_close)

    with pytest.raises(DeviceUnavailableError, match="Failed to write"):
        DeviceSink([str(device_file)]).write(b"data")

    assert len(closed) == 1


def test_busy_port_times_out(device_file):
    sink = DeviceSink([str(device_file)], lock_timeout=0.01)
    DeviceSink._port_lock.acquire()
    try:
        with pytest.raises(DeviceUnavailableError, match="busy"):
            sink.write(b"data")
    finally:
        DeviceSink._port_lock.release()

    assert sink.write(b"data") == str(device_file)
