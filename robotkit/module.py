"""Loaded modules of a process and the memory segments they occupy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

_SEGMENT_NAME_LIMIT = 15


def _address_of(other: object, kind: type) -> Optional[int]:
    """Return the address to compare against, or None if unsupported."""
    if isinstance(other, kind):
        return other.base  # type: ignore[attr-defined]
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


@dataclass(frozen=True, eq=False)
class Segment:
    """A contiguous region of a module, ordered by its base address."""

    valid: bool = False
    name: str = ""
    base: int = 0
    size: int = 0

    def __post_init__(self) -> None:
        if len(self.name) > _SEGMENT_NAME_LIMIT:
            object.__setattr__(self, "name", self.name[:_SEGMENT_NAME_LIMIT])

    def contains(self, address: int) -> bool:
        """Return whether ``address`` falls inside this segment."""
        return self.base <= address < self.base + self.size

    def __lt__(self, other: Union["Segment", int]) -> bool:
        address = _address_of(other, Segment)
        if address is None:
            return NotImplemented
        return self.base < address

    def __le__(self, other: Union["Segment", int]) -> bool:
        address = _address_of(other, Segment)
        if address is None:
            return NotImplemented
        return self.base <= address

    def __gt__(self, other: Union["Segment", int]) -> bool:
        address = _address_of(other, Segment)
        if address is None:
            return NotImplemented
        return self.base > address

    def __ge__(self, other: Union["Segment", int]) -> bool:
        address = _address_of(other, Segment)
        if address is None:
            return NotImplemented
        return self.base >= address

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return (
            self.valid == other.valid
            and self.base == other.base
            and self.size == other.size
            and self.name == other.name
        )

    def __hash__(self) -> int:
        return hash((self.valid, self.name, self.base, self.size))


class Module:
    """A module (executable or shared library) mapped into a process.

    A module built without a process is invalid.
    """

    __slots__ = ("_valid", "_name", "_path", "_base", "_size", "_process", "_segments")

    def __init__(
        self,
        process: Any = None,
        name: str = "",
        path: str = "",
        base: int = 0,
        size: int = 0,
    ) -> None:
        self._valid = process is not None
        self._process = process
        self._name = name
        self._path = path
        self._base = base
        self._size = size
        self._segments: list[Segment] = []

    def __repr__(self) -> str:
        return (
            f"Module(name={self._name!r}, path={self._path!r}, "
            f"base={self._base:#x}, size={self._size:#x})"
        )

    @property
    def name(self) -> str:
        """File name of the module."""
        return self._name

    @property
    def path(self) -> str:
        """Full path of the module."""
        return self._path

    @property
    def base(self) -> int:
        """Address at which the module is loaded."""
        return self._base

    @property
    def size(self) -> int:
        """Size of the module in memory."""
        return self._size

    @property
    def process(self) -> Any:
        """The process this module belongs to."""
        return self._process

    def is_valid(self) -> bool:
        """Return whether this module describes a real loaded module."""
        return self._valid

    def segments(self) -> list[Segment]:
        """Return the module's segments sorted by base address."""
        return sorted(self._segments)

    def contains(self, address: int) -> bool:
        """Return whether ``address`` falls inside this module."""
        return self._base <= address < self._base + self._size

    def __lt__(self, other: Union["Module", int]) -> bool:
        address = _address_of(other, Module)
        if address is None:
            return NotImplemented
        return self._base < address

    def __le__(self, other: Union["Module", int]) -> bool:
        address = _address_of(other, Module)
        if address is None:
            return NotImplemented
        return self._base <= address

    def __gt__(self, other: Union["Module", int]) -> bool:
        address = _address_of(other, Module)
        if address is None:
            return NotImplemented
        return self._base > address

    def __ge__(self, other: Union["Module", int]) -> bool:
        address = _address_of(other, Module)
        if address is None:
            return NotImplemented
        return self._base >= address

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Module):
            return NotImplemented
        return (
            self._valid == other._valid
            and self._base == other._base
            and self._size == other._size
            and self._process == other._process
        )

    def __hash__(self) -> int:
        return hash((self._valid, self._base, self._size))