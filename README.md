# fsnotice

Building blocks for file-system watchers, in plain Python with no
third-party dependencies.

## Modules

- `fsnotice.errors`: the `Action` values a watcher reports (`ADD`, `DELETE`,
  `MODIFIED`, `MOVED`) and the `ErrorCode` values a failed watch yields
  (`FILE_NOT_FOUND`, `FILE_REPEATED`, `FILE_OUT_OF_SCOPE`,
  `FILE_NOT_READABLE`, `FILE_REMOTE`, `UNSPECIFIED`). `WatchError` is an
  exception carrying a `code` and a `log` message. `create_last_error(err, log)`
  records `log` as the process-wide last error and returns `err` as an
  `ErrorCode`; `get_last_error_log()` returns that message. `action_name`
  gives "Add", "Delete", "Modified" or "Moved", and "Bad Action" for anything
  else.
- `fsnotice.sync`: `Mutex`, a re-entrant lock used through `lock()` and
  `unlock()` or as a context manager. `unlock()` raises `RuntimeError` when
  the calling thread does not hold it.
- `fsnotice.codepoints`: `Utf8`, `Utf16` and `Utf32`, each with `decode`
  (returning `(codepoint, next_index)`), `encode`, `next` and `count` over
  sequences of code units. `Utf32` also converts single narrow characters in
  a given encoding (`decode_ansi`, `encode_ansi`, the locale's encoding by
  default) and wide characters of 2 or 4 bytes (`decode_wide`,
  `encode_wide`).
- `fsnotice.convert_utf8`: `utf8_from_ansi`, `utf8_from_wide`,
  `utf8_from_latin1`, `utf8_to_ansi`, `utf8_to_wide`, `utf8_to_latin1`,
  `utf8_to_utf8`, `utf8_to_utf16` and `utf8_to_utf32`.
- `fsnotice.convert_wide`: the same set of conversions for UTF-16 units
  (`utf16_*`) and UTF-32 codepoints (`utf32_*`).
- `fsnotice.filesystem`: `is_directory`, `entry_names` (sorted names in a
  directory), `change_working_directory`, `get_current_working_directory`,
  `get_os_slash`, `find_mount_point`, `find_device_path` (reads
  `/proc/mounts` unless another mount table is given),
  `is_local_fuse_directory`, and remote file-system checks: `is_remote_fs`,
  `is_remote_magic` (by file-system magic number) and `is_unc_path`.
- `fsnotice.system`: the running `OperatingSystem` (`current_os`) and the
  native notification `Backend` (`current_backend`), a millisecond `sleep`,
  the directory of the running executable (`get_process_path`), raising the
  open-file soft limit to the hard limit (`max_fd`), and the open-file limit
  seen on first call (`get_max_fd`, 60 on Windows).

## Installing

```
pip install .
```

## Examples

```python
from fsnotice.errors import Action, ErrorCode, action_name, create_last_error, get_last_error_log

print(action_name(Action.MODIFIED))          # Modified
create_last_error(ErrorCode.FILE_NOT_FOUND, "/missing/dir")
print(get_last_error_log())                  # /missing/dir
```

```python
from fsnotice.convert_utf8 import utf8_to_utf16
from fsnotice.convert_wide import utf16_to_utf8

data = "héllo 😀".encode("utf-8")
units = utf8_to_utf16(data)
assert utf16_to_utf8(units) == data
```

```python
from fsnotice.sync import Mutex

guard = Mutex()
with guard:
    with guard:   # re-entrant
        pass
```

```python
from fsnotice.filesystem import is_directory, is_remote_fs
from fsnotice.system import current_backend, get_max_fd

print(is_directory("."), is_remote_fs("."))
print(current_backend(), get_max_fd())
```

## What it does not do

The package does not watch directories itself. It has no watcher object, no
way to add or remove watches, no listener callbacks and no background thread
delivering events; `Backend` only names the notification mechanism native to
the running system. It offers the pieces such a watcher is built on.

## Running the tests

```
pip install .[test]
pytest
```