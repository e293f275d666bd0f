"""Platform identification, sleeping, process location and descriptor limits."""

from __future__ import annotations

import os
import sys
import time
from enum import IntEnum

__all__ = [
    "OperatingSystem",
    "Backend",
    "current_os",
    "current_backend",
    "sleep",
    "get_process_path",
    "max_fd",
    "get_max_fd",
]

_UINT64 = 0xFFFFFFFFFFFFFFFF

# Directory reads that one thread can wait on at once under Windows.
_WINDOWS_MAX_FD = 60


class OperatingSystem(IntEnum):
    """Operating systems the watcher distinguishes."""

    WIN = 1
    LINUX = 2
    MACOSX = 3
    BSD = 4
    SOLARIS = 5
    HAIKU = 6
    ANDROID = 7
    IOS = 8


class Backend(IntEnum):
    """File notification backends."""

    WIN32 = 1
    INOTIFY = 2
    KQUEUE = 3
    FSEVENTS = 4
    GENERIC = 5


_BSD_PREFIXES = ("freebsd", "openbsd", "netbsd", "dragonfly")


def current_os() -> OperatingSystem | None:
    """Return the running operating system, or None if it is not one listed."""
    platform = sys.platform
    if platform in ("win32", "cygwin"):
        return OperatingSystem.WIN
    if platform.startswith(_BSD_PREFIXES):
        return OperatingSystem.BSD
    if platform == "ios":
        return OperatingSystem.IOS
    if platform == "darwin":
        return OperatingSystem.MACOSX
    if platform == "android":
        return OperatingSystem.ANDROID
    if platform.startswith("linux"):
        if "ANDROID_ROOT" in os.environ:
            return OperatingSystem.ANDROID
        return OperatingSystem.LINUX
    if platform.startswith("sunos"):
        return OperatingSystem.SOLARIS
    if platform.startswith("haiku"):
        return OperatingSystem.HAIKU
    return None


def current_backend() -> Backend:
    """Return the notification backend native to the running system."""
    system = current_os()
    if system is OperatingSystem.WIN:
        return Backend.WIN32
    if system in (OperatingSystem.BSD, OperatingSystem.IOS):
        return Backend.KQUEUE
    if system is OperatingSystem.MACOSX:
        return Backend.FSEVENTS
    if system in (OperatingSystem.LINUX, OperatingSystem.ANDROID):
        return Backend.INOTIFY
    return Backend.GENERIC


def sleep(ms: int | float) -> None:
    """Suspend the calling thread for *ms* milliseconds."""
    time.sleep(ms / 1000)


def get_process_path() -> str:
    """Return the directory of the running executable, ending in a separator."""
    system = current_os()
    if system is OperatingSystem.ANDROID:
        return "/sdcard/"
    if system is OperatingSystem.LINUX:
        try:
            return os.path.dirname(os.readlink("/proc/self/exe")) + "/"
        except OSError:
            return "./"
    if not sys.executable:
        return "./"
    directory = os.path.dirname(os.path.realpath(sys.executable))
    return directory if directory.endswith(os.sep) else directory + os.sep


_maxed = False


def max_fd() -> None:
    """Raise the soft limit on open descriptors to the hard limit, once."""
    global _maxed
    if _maxed or os.name == "nt":
        return
    import resource

    try:
        _, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
        resource.setrlimit(resource.RLIMIT_NOFILE, (hard, hard))
    except (ValueError, OSError):
        pass
    _maxed = True


_max_fd_cache: int | None = None


def get_max_fd() -> int:
    """Return the descriptor limit observed on the first call."""
    global _max_fd_cache
    if _max_fd_cache is None:
        if os.name == "nt":
            _max_fd_cache = _WINDOWS_MAX_FD
        else:
            import resource

            soft, _ = resource.getrlimit(resource.RLIMIT_NOFILE)
            _max_fd_cache = soft & _UINT64
    return _max_fd_cache