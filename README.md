# ztoolkit

Small building blocks for Python services:

- `ztoolkit.util`: string helpers (`split`, `trim`, `replace`, `start_with`, `end_with`), hex dumps (`hexdump`, `hexmem`), random strings (`make_rand_str`), program paths (`exe_path`, `exe_dir`, `exe_name`), IPv4 checks (`is_ip`), clocks (`current_millisecond`, `current_microsecond`), local time formatting (`get_time_str`, `local_time`) and thread naming and CPU affinity.
- `ztoolkit.resource_pool`: `ResourcePool`, which hands out objects as `PooledObject` handles and takes them back for reuse when they are released.
- `ztoolkit.mini`: the `Ini` mapping of `"section.name"` keys to `Variant` values, with parsing and dumping of INI text and files.
- `ztoolkit.errcodes`: the `UvErrno` enumeration of negative, portable error codes and their messages.
- `ztoolkit.uv_errno`: `err_name`, `strerror`, `translate_posix_error`, and helpers that turn an exception's errno into one of those codes.
- `ztoolkit.sql_connection`: `SqlConnection`, a MySQL connection (via PyMySQL) that runs printf-style statements and returns rows as text, raising `SqlError` on failure.

## Install

```
pip install ztoolkit
```

## Resource pool

```python
from ztoolkit.resource_pool import ResourcePool

pool = ResourcePool(list, 50)
with pool.obtain() as obj:
    obj.append("work")  # goes back to the pool when the block ends

handle = pool.obtain()
handle.quit()       # this object will not be returned to the pool
handle.release()
```

An object is kept for reuse only while the pool holds fewer than its size; otherwise it is dropped.

## INI data

```python
from ztoolkit.mini import Ini

ini = Ini()
ini.parse("[net]\nport=8080\n")
port = ini["net.port"].to(int)   # 8080
print(ini.dump())                # CRLF line ends, sections in key order
```

`Ini.parse_file` raises `ValueError` when the file cannot be read. `Ini.instance()` returns one shared instance per process.

## Error codes

```python
import errno
from ztoolkit.errcodes import UvErrno
from ztoolkit.uv_errno import err_name, strerror, translate_posix_error

strerror(UvErrno.EINVAL)                      # "invalid argument"
err_name(UvErrno.ENOENT)                      # "ENOENT"
translate_posix_error(errno.EWOULDBLOCK)      # same as -errno.EAGAIN
```

## MySQL

```python
from ztoolkit.sql_connection import SqlConnection

password = "password"
with SqlConnection("localhost", 3306, "test_db", "user", password) as conn:
    result = conn.execute("select user_id from test_table where user_name='%s'", "name")
    for row in result:
        print(row[0])
    print(result.affected_rows, result.row_id)
```

`query_dicts` returns each row as a dictionary keyed by column name.

## What it does not do

The package has no logging facility of its own (no log channels, writers or log files) and no timing or ticker helpers; use the standard `logging` and `time` modules for those. It has no command-line program.

## Tests

```
pip install ztoolkit[test]
pytest
```