"""Reading the memory map listing of a process into a list of modules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

from robotkit.module import Module

_PATH_LIMIT = 1023

_MAPS_LINE = re.compile(
    r"^\s*([0-9a-fA-F]+)-([0-9a-fA-F]+)"
    r"\s+(\S{1,4})"
    r"\s+([0-9a-fA-F]+)"
    r"\s+([0-9a-fA-F]+):([0-9a-fA-F]+)"
    r"\s+(\d+)"
    r"\s+(\S+)"
)


@dataclass(frozen=True)
class Mapping:
    """One line of a memory map listing that names a backing path."""

    start: int
    stop: int
    access: str
    offset: int
    dev_major: int
    dev_minor: int
    inode: int
    pathname: str


def file_name(path: str) -> str:
    """Return the part of ``path`` after the last slash."""
    return path.rpartition("/")[2]


def name_matcher(name: Optional[str]) -> Callable[[str], bool]:
    """Return a predicate that fully matches names against ``name``.

    The pattern is a case-insensitive regular expression; ``None`` matches
    every name. An invalid pattern raises ValueError.
    """
    if name is None:
        return lambda _candidate: True
    try:
        pattern = re.compile(name, re.IGNORECASE)
    except re.error as exc:
        raise ValueError(f"invalid name pattern {name!r}: {exc}") from exc
    return lambda candidate: pattern.fullmatch(candidate) is not None


def parse_maps(lines: Iterable[str]) -> Iterator[Mapping]:
    """Yield the mappings of ``lines`` that carry a path; skip all others."""
    for line in lines:
        match = _MAPS_LINE.match(line)
        if match is None:
            continue
        start, stop, access, offset, major, minor, inode, path = match.groups()
        yield Mapping(
            start=int(start, 16),
            stop=int(stop, 16),
            access=access,
            offset=int(offset, 16) & 0xFFFFFFFF,
            dev_major=int(major, 16) & 0xFFFF,
            dev_minor=int(minor, 16) & 0xFFFF,
            inode=int(inode) & 0xFFFFFFFF,
            pathname=path[:_PATH_LIMIT],
        )


def collect_modules(process: Any, lines: Iterable[str], name: Optional[str] = None) -> list[Module]:
    """Build the sorted modules of ``process`` from its memory map ``lines``.

    Consecutive mappings of the same path form one module. Pseudo paths
    such as ``[heap]`` are left out. Only modules whose file name fully
    matches the case-insensitive pattern ``name`` are kept; an invalid
    pattern gives an empty list.
    """
    try:
        matches = name_matcher(name)
    except ValueError:
        return []

    result: list[Module] = []

    def store(start: int, stop: int, path: str) -> None:
        module_name = file_name(path)
        if matches(module_name):
            result.append(Module(process, module_name, path, start, stop - start))

    current_path = ""
    current_start = 0
    current_stop = 0

    for mapping in parse_maps(lines):
        if mapping.pathname == current_path:
            current_stop = mapping.stop
            continue

        if current_start != 0:
            store(current_start, current_stop, current_path)

        if mapping.pathname.startswith("["):
            current_start = 0
            current_path = ""
        else:
            current_start = mapping.start
            current_stop = mapping.stop
            current_path = mapping.pathname

    if current_start != 0:
        store(current_start, current_stop, current_path)

    return sorted(result)