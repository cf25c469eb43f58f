"""A bump allocator over a single growable byte region."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType

DEFAULT_ALIGNMENT = 8


class ArenaError(Exception):
    """Raised when an arena cannot be created, grown or allocated from."""


@dataclass(frozen=True)
class Allocation:
    """A record of one allocation, kept by arenas in debug mode."""

    index: int
    size: int


@dataclass
class Arena:
    """A fixed-size byte region handed out in aligned, consecutive slices.

    Allocations return the offset of the slice within ``region``. Memory is
    never freed piecemeal: ``clear`` rewinds the arena, ``destroy`` drops it.
    """

    size: int
    debug: bool = False
    region: bytearray | None = field(init=False, repr=False)
    index: int = field(init=False, default=0)
    allocations: list[Allocation] = field(init=False, default_factory=list)

    def __init__(self, size: int, debug: bool = False) -> None:
        if size <= 0:
            raise ArenaError("arena size must be positive")
        self.size = size
        self.debug = debug
        self.region = bytearray(size)
        self.index = 0
        self.allocations = []

    def expand(self, size: int) -> Arena:
        """Grow the region to ``size`` bytes, keeping its contents."""
        if self.region is None:
            raise ArenaError("arena has been destroyed")
        if size <= self.size:
            raise ArenaError("an arena can only be expanded to a larger size")
        self.region.extend(bytes(size - self.size))
        self.size = size
        return self

    def alloc(self, size: int) -> int:
        """Allocate ``size`` bytes at the default alignment; return the offset."""
        return self.alloc_aligned(size, DEFAULT_ALIGNMENT)

    def alloc_aligned(self, size: int, alignment: int) -> int:
        """Allocate ``size`` bytes aligned to ``alignment``; return the offset.

        An alignment of zero places the slice right after the previous one.
        """
        if size <= 0:
            raise ArenaError("allocation size must be positive")
        if self.region is None:
            raise ArenaError("arena has been destroyed")
        if alignment < 0:
            raise ArenaError("alignment must not be negative")

        index = self.index
        offset = 0
        if alignment:
            offset = index % alignment
            if offset:
                index = index - offset + alignment

        # The misalignment is counted once more against the remaining space.
        if self.size - (index + offset) < size:
            raise ArenaError(
                f"not enough space for {size} bytes "
                f"({self.size - index} of {self.size} left)"
            )

        if self.debug:
            self.allocations.append(Allocation(index, size))

        self.index = index + size
        return index

    def copy_from(self, src: Arena) -> int:
        """Copy the used part of ``src`` into this arena; return bytes copied."""
        if self.region is None or src.region is None:
            raise ArenaError("arena has been destroyed")
        count = min(src.index, self.size)
        self.region[:count] = src.region[:count]
        self.index = count
        return count

    def clear(self) -> None:
        """Rewind the arena so its whole region can be reused."""
        self.index = 0
        self.allocations.clear()

    def destroy(self) -> None:
        """Release the region; the arena cannot be allocated from afterwards."""
        self.allocations.clear()
        self.region = None

    def allocation_at(self, offset: int) -> Allocation | None:
        """Return the debug record of the allocation starting at ``offset``."""
        if not self.debug:
            raise ArenaError("allocation records are kept only in debug mode")
        return next((a for a in self.allocations if a.index == offset), None)

    def __enter__(self) -> Arena:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()