"""
Copy-on-share state wrapper.

Clones share one underlying sub-process instead of copying it. Mutation is
only allowed while a single handle is alive; the rule is enforced at the
moment of mutation, so holding several handles for reading is fine until
the next ``execute``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from topogen.errors import OwnershipViolationError
from topogen.glp.process import SubProcess

SP = TypeVar("SP", bound=SubProcess)


class _Cell(Generic[SP]):
    __slots__ = ("value", "holders")

    def __init__(self, value: SP) -> None:
        self.value = value
        self.holders = 1


class SharedState(SubProcess, Generic[SP]):
    """
    Shared handle on a sub-process.

    Handles are released explicitly with ``release()`` or by leaving a
    ``with`` block. A released handle can no longer be read.

    Example:
        owner = SharedState(GrayCode(2))
        with owner.clone() as snapshot:
            print(snapshot.value.bits())
        owner.execute(0)
    """

    def __init__(self, proc: SP) -> None:
        self._cell: _Cell[SP] = _Cell(proc)
        self._released = False

    @classmethod
    def _share(cls, cell: _Cell[SP]) -> SharedState[SP]:
        handle = cls.__new__(cls)
        handle._cell = cell
        handle._released = False
        cell.holders += 1
        return handle

    @property
    def value(self) -> SP:
        """The shared sub-process. Treat it as read-only."""
        if self._released:
            raise OwnershipViolationError("state handle was already released")
        return self._cell.value

    @property
    def holders(self) -> int:
        return self._cell.holders

    @property
    def released(self) -> bool:
        return self._released

    def clone(self) -> SharedState[SP]:
        """Return another handle on the same state. O(1)."""
        if self._released:
            raise OwnershipViolationError("cannot clone a released state handle")
        return self._share(self._cell)

    def release(self) -> None:
        """Drop this handle. Releasing twice is a no-op."""
        if not self._released:
            self._released = True
            self._cell.holders -= 1

    def size(self) -> int:
        return self.value.size()

    def execute(self, position: int) -> tuple[bool, Any]:
        proc = self.value
        if self._cell.holders != 1:
            raise OwnershipViolationError(
                f"cannot mutate shared state: {self._cell.holders - 1} other handle(s) still alive",
                holders=self._cell.holders,
            )
        return proc.execute(position)

    def __enter__(self) -> SharedState[SP]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
