"""Directory queries, mount point lookup and remote file system detection."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterator

__all__ = [
    "change_working_directory",
    "get_current_working_directory",
    "get_os_slash",
    "is_directory",
    "entry_names",
    "find_mount_point",
    "find_device_path",
    "is_local_fuse_directory",
    "is_remote_magic",
    "is_unc_path",
    "is_remote_fs",
]

_DEFAULT_MOUNTS = "/proc/mounts"

_MAGIC_AFS = 0x5346414F
_MAGIC_AUFS = 0x61756673
_MAGIC_CEPH = 0x00C36400
_MAGIC_CIFS = 0xFF534D42
_MAGIC_CODA = 0x73757245
_MAGIC_FHGFS = 0x19830326
_MAGIC_FUSEBLK = 0x65735546
_MAGIC_FUSECTL = 0x65735543
_MAGIC_GFS = 0x01161970
_MAGIC_GPFS = 0x47504653
_MAGIC_KAFS = 0x6B414653
_MAGIC_LUSTRE = 0x0BD00BD0
_MAGIC_NCP = 0x564C
_MAGIC_NFS = 0x6969
_MAGIC_NFSD = 0x6E667364
_MAGIC_OCFS2 = 0x7461636F
_MAGIC_PANFS = 0xAAD7AAEA
_MAGIC_PIPEFS = 0x50495045
_MAGIC_SMB = 0x517B
_MAGIC_SNFS = 0xBEEFDEAD
_MAGIC_VMHGFS = 0xBACBACBC
_MAGIC_VXFS = 0xA501FCF5

_REMOTE_MAGICS = frozenset(
    {
        _MAGIC_AFS,
        _MAGIC_AUFS,
        _MAGIC_CEPH,
        _MAGIC_CIFS,
        _MAGIC_CODA,
        _MAGIC_FHGFS,
        _MAGIC_FUSEBLK,
        _MAGIC_FUSECTL,
        _MAGIC_GFS,
        _MAGIC_GPFS,
        _MAGIC_KAFS,
        _MAGIC_LUSTRE,
        _MAGIC_NCP,
        _MAGIC_NFS,
        _MAGIC_NFSD,
        _MAGIC_OCFS2,
        _MAGIC_PANFS,
        _MAGIC_PIPEFS,
        _MAGIC_SMB,
        _MAGIC_SNFS,
        _MAGIC_VMHGFS,
        _MAGIC_VXFS,
    }
)

# File system type names, as listed in the mount table, of the remote kinds.
_FSTYPE_MAGIC = {
    "afs": _MAGIC_AFS,
    "aufs": _MAGIC_AUFS,
    "ceph": _MAGIC_CEPH,
    "cifs": _MAGIC_CIFS,
    "smb3": _MAGIC_CIFS,
    "coda": _MAGIC_CODA,
    "fhgfs": _MAGIC_FHGFS,
    "beegfs": _MAGIC_FHGFS,
    "fuse": _MAGIC_FUSEBLK,
    "fuseblk": _MAGIC_FUSEBLK,
    "fusectl": _MAGIC_FUSECTL,
    "gfs": _MAGIC_GFS,
    "gfs2": _MAGIC_GFS,
    "gpfs": _MAGIC_GPFS,
    "kafs": _MAGIC_KAFS,
    "lustre": _MAGIC_LUSTRE,
    "ncpfs": _MAGIC_NCP,
    "ncp": _MAGIC_NCP,
    "nfs": _MAGIC_NFS,
    "nfs4": _MAGIC_NFS,
    "nfsd": _MAGIC_NFSD,
    "ocfs2": _MAGIC_OCFS2,
    "panfs": _MAGIC_PANFS,
    "pipefs": _MAGIC_PIPEFS,
    "smb": _MAGIC_SMB,
    "smbfs": _MAGIC_SMB,
    "snfs": _MAGIC_SNFS,
    "vmhgfs": _MAGIC_VMHGFS,
    "vxfs": _MAGIC_VXFS,
}

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def change_working_directory(path: str | os.PathLike[str]) -> bool:
    """Change the working directory; return whether it succeeded."""
    try:
        os.chdir(path)
    except OSError:
        return False
    return True


def get_current_working_directory() -> str:
    """Return the working directory, or an empty string if it is unavailable."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def get_os_slash() -> str:
    """Return the platform's path separator."""
    return "\\" if os.name == "nt" else "/"


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Return whether *path* names an existing directory."""
    return os.path.isdir(path)


def entry_names(path: str | os.PathLike[str]) -> list[str]:
    """Return the names in directory *path*, sorted, without ``.`` and ``..``.

    A directory that cannot be read gives an empty list.
    """
    try:
        with os.scandir(path) as entries:
            return sorted(entry.name for entry in entries if entry.name not in (".", ".."))
    except OSError:
        return []


def _remove_slash_at_end(path: str) -> str:
    stripped = path.rstrip("/\\")
    return stripped if stripped else path[:1]


def find_mount_point(path: str | os.PathLike[str]) -> str:
    """Return the mount point holding *path*, or an empty string on failure."""
    try:
        start = os.fspath(path)
        if not is_directory(start):
            start = os.path.dirname(os.path.abspath(start)) or os.curdir
        current = os.path.realpath(start)
        last = os.stat(current)
        while True:
            parent = os.path.dirname(current)
            st = os.stat(parent)
            if st.st_dev != last.st_dev or st.st_ino == last.st_ino:
                break
            current = parent
            last = st
    except OSError:
        return ""
    return current


def _unescape(field: str) -> str:
    return _OCTAL_ESCAPE.sub(lambda match: chr(int(match.group(1), 8)), field)


def _mount_entries(mounts_file: str | os.PathLike[str]) -> Iterator[tuple[str, str, str]]:
    """Yield ``(device, directory, type)`` for each line of a mount table."""
    with open(mounts_file, encoding="utf-8", errors="surrogateescape") as table:
        for line in table:
            fields = line.split()
            if len(fields) < 3 or fields[0].startswith("#"):
                continue
            yield _unescape(fields[0]), _unescape(fields[1]), _unescape(fields[2])


def find_device_path(
    directory: str, mounts_file: str | os.PathLike[str] = _DEFAULT_MOUNTS
) -> str:
    """Return the device mounted on *directory*, or an empty string if none."""
    try:
        for device, mount_dir, _ in _mount_entries(mounts_file):
            if mount_dir == directory:
                return device
    except OSError:
        return ""
    return ""


def _mount_type(
    directory: str, mounts_file: str | os.PathLike[str] = _DEFAULT_MOUNTS
) -> str:
    found = ""
    try:
        for _, mount_dir, fstype in _mount_entries(mounts_file):
            if mount_dir == directory:
                found = fstype
    except OSError:
        return ""
    return found


def is_local_fuse_directory(directory: str | os.PathLike[str]) -> bool:
    """Return whether a FUSE directory is backed by a device listed as mounted."""
    mount_point = find_mount_point(_remove_slash_at_end(os.fspath(directory)))
    if not mount_point:
        return False
    return bool(find_device_path(mount_point))


def is_remote_magic(magic: int) -> bool:
    """Return whether a file system magic number denotes a remote file system."""
    return (magic & 0xFFFFFFFF) in _REMOTE_MAGICS


def is_unc_path(directory: str) -> bool:
    """Return whether *directory* starts with two slashes, as a network share does."""
    return len(directory) >= 2 and directory[0] in "\\/" and directory[1] in "\\/"


def _filesystem_magic(directory: str) -> int | None:
    mount_point = find_mount_point(_remove_slash_at_end(directory))
    if not mount_point:
        return None
    fstype = _mount_type(mount_point)
    if fstype.startswith("fuse."):
        return _MAGIC_FUSEBLK
    return _FSTYPE_MAGIC.get(fstype)


def is_remote_fs(directory: str | os.PathLike[str]) -> bool:
    """Return whether *directory* lives on a remote file system."""
    path = os.fspath(directory)
    if os.name == "nt":
        return is_unc_path(path)
    magic = _filesystem_magic(path)
    if magic is None:
        return False
    if magic == _MAGIC_FUSEBLK and sys.platform.startswith("linux"):
        return not is_local_fuse_directory(path)
    return is_remote_magic(magic)