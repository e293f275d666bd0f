import os
import sys
import time

import pytest

from fsnotice.system import (
    Backend,
    OperatingSystem,
    current_backend,
    current_os,
    get_max_fd,
    get_process_path,
    max_fd,
    sleep,
)


@pytest.fixture
def no_android(monkeypatch):
    monkeypatch.delenv("ANDROID_ROOT", raising=False)


@pytest.mark.parametrize(
    ("platform", "system", "backend"),
    [
        ("win32", OperatingSystem.WIN, Backend.WIN32),
        ("linux", OperatingSystem.LINUX, Backend.INOTIFY),
        ("darwin", OperatingSystem.MACOSX, Backend.FSEVENTS),
        ("freebsd14", OperatingSystem.BSD, Backend.KQUEUE),
        ("openbsd7", OperatingSystem.BSD, Backend.KQUEUE),
        ("sunos5", OperatingSystem.SOLARIS, Backend.GENERIC),
    ],
)
def test_platform_detection(monkeypatch, no_android, platform, system, backend):
    monkeypatch.setattr(sys, "platform", platform)
    assert current_os() is system
    assert current_backend() is backend


def test_unknown_platform_uses_generic(monkeypatch):
    monkeypatch.setattr(sys, "platform", "plan9")
    assert current_os() is None
    assert current_backend() is Backend.GENERIC


def test_android_detected_from_environment(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("ANDROID_ROOT", "/system")
    assert current_os() is OperatingSystem.ANDROID
    assert current_backend() is Backend.INOTIFY
    assert get_process_path() == "/sdcard/"


def test_sleep_waits_at_least_requested():
    started = time.monotonic()
    result = sleep(50)
    elapsed = time.monotonic() - started
    assert result is None
    assert elapsed >= 0.045


def test_process_path_is_directory_with_separator():
    path = get_process_path()
    assert path.endswith(("/", os.sep))
    assert os.path.isdir(path)


def test_max_fd_is_stable_and_positive():
    max_fd()
    first = get_max_fd()
    assert first >= 1
    assert get_max_fd() == first