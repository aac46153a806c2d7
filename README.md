# robotkit

Inspect running processes and the files mapped into them. The package also
has a few small value types for integer geometry and random delays.

## Installation

```
pip install robotkit
```

## Processes

```python
from robotkit.process import Process, current_process, list_processes, is_sys_64bit

me = current_process()
print(me.pid, me.name, me.path, me.is_64bit())

# Case-insensitive regular expression, matched against the whole process name
for proc in list_processes(".*python.*"):
    print(proc.pid, proc.name)

proc = Process(1234)
if proc.is_valid() and not proc.has_exited():
    print(proc.is_debugged())  # True when TracerPid in /proc/<pid>/status is non-zero
    proc.exit()                # sends SIGTERM
    # proc.kill()              # sends SIGKILL

print(is_sys_64bit())          # True when the machine reports x86_64
```

A `Process` built with no pid, or with a pid that does not exist, is invalid:
its `pid` is `0`, and its `name` and `path` are empty. `open(pid)` attaches to
another process and returns whether it succeeded; `close()` resets to the
invalid state. `handle` is always `0`.

Two processes compare equal when they have the same pid, and a process also
compares equal to a plain integer pid. `list_processes` returns an empty list
for an invalid pattern.

## Modules

`Process.modules(name)` returns the files mapped into a process as
`robotkit.module.Module` objects, sorted by base address. Consecutive
mappings of one path form one module, and pseudo paths such as `[heap]` are
left out. The optional `name` is a case-insensitive regular expression that
has to match the whole file name; an invalid pattern gives no modules.

```python
for module in me.modules(r"libc.*\.so.*"):
    print(hex(module.base), module.size, module.name, module.path)
    print(module.contains(module.base))  # True
```

Modules order by base address and can be compared with an integer address
(`module < 0x400000`). Two modules are equal when validity, base, size and
process match.

The memory-map parsing is also available on its own, for example on a saved
copy of a maps file:

```python
from robotkit.procmaps import parse_maps, collect_modules, file_name

with open("/proc/self/maps") as handle:
    for mapping in parse_maps(handle):
        print(mapping.start, mapping.stop, mapping.access, mapping.pathname)

with open("/proc/self/maps") as handle:
    modules = collect_modules(None, handle, r".*\.so.*")
```

## Geometry and ranges

```python
from robotkit.geometry import Point, Size
from robotkit.ranges import Range

p = Point(3, 4) + Point(1, 1)   # Point(x=4, y=5)
q = p - 2                       # an int applies to both coordinates
s = p.to_size()                 # Size(w=4, h=5)
print(s.is_empty(), (-p).is_zero())

delay = Range(40, 90)
print(delay.span(), delay.contains(90), delay.contains(90, inclusive=False))
print(delay.random())           # 40 <= value < 90; the minimum when the range is empty
```

## Limits

- Process inspection reads `/proc` and sends POSIX signals, so it works on
  Linux only; on Windows every process is invalid.
- `Module.segments()` always returns an empty list: segment information is
  not read from any process. `robotkit.module.Segment` exists as a value type
  only.
- There is no mouse, keyboard, window or screen control, and no command-line
  tool.