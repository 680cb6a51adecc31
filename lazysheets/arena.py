"""Slot arena addressing widgets through generation-checked handles.

The arena is the single owner of every live widget. Other code holds
``Handle`` values, which are plain data: resolving one after its slot was
released yields ``None`` instead of a stale object. Slots are reused, and the
generation counter keeps an old handle from resolving to the new occupant.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Handle:
    """Non-owning reference to an arena slot."""

    index: int
    generation: int


@dataclass
class _Slot:
    generation: int = 0
    value: object | None = None
    live: bool = False


class HandleArena:
    """Generation-counted object store.

    ``release`` drops a slot and, when the released object exposes
    ``owned_handles()``, releases those children as well, so freeing a
    picker frees its items in the same call.
    """

    def __init__(self) -> None:
        self._slots: list[_Slot] = []
        self._free: list[int] = []

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot.live)

    def reserve(self) -> Handle:
        """Allocate an empty slot so its handle can be given out before the value exists."""
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
        else:
            index = len(self._slots)
            slot = _Slot()
            self._slots.append(slot)
        slot.live = True
        slot.value = None
        return Handle(index=index, generation=slot.generation)

    def fill(self, handle: Handle, value: object) -> None:
        """Store ``value`` in a slot obtained from ``reserve``."""
        slot = self._live_slot(handle)
        if slot is None:
            raise KeyError(f"handle {handle} is not live")
        slot.value = value

    def insert(self, value: object) -> Handle:
        handle = self.reserve()
        self.fill(handle, value)
        return handle

    def _live_slot(self, handle: Handle) -> _Slot | None:
        if not (0 <= handle.index < len(self._slots)):
            return None
        slot = self._slots[handle.index]
        if not slot.live or slot.generation != handle.generation:
            return None
        return slot

    def is_live(self, handle: Handle) -> bool:
        return self._live_slot(handle) is not None

    def resolve(self, handle: Handle | None) -> object | None:
        """Return the object behind ``handle`` or ``None`` when it was released."""
        if handle is None:
            return None
        slot = self._live_slot(handle)
        if slot is None:
            return None
        return slot.value

    def release(self, handle: Handle) -> bool:
        """Free ``handle`` and everything it owns; return whether it was live."""
        slot = self._live_slot(handle)
        if slot is None:
            return False
        value = slot.value
        slot.value = None
        slot.live = False
        slot.generation += 1
        self._free.append(handle.index)

        owned = getattr(value, "owned_handles", None)
        if callable(owned):
            for child in owned():
                self.release(child)
        return True
