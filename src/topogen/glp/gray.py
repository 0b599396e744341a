"""Binary reflected Gray code as a sub-process."""

from __future__ import annotations

from topogen.glp.process import SubProcess, check_position


class GrayCode(SubProcess):
    """
    n bits, one position per bit. Each step flips a single bit, so the
    counter walks all 2**n words in reflected Gray order.
    """

    def __init__(self, n: int) -> None:
        self.word = [False] * n

    def bits(self) -> str:
        """Most significant bit first."""
        return "".join("1" if b else "0" for b in reversed(self.word))

    def size(self) -> int:
        return len(self.word)

    def execute(self, position: int) -> tuple[bool, int]:
        check_position(position, len(self.word))
        self.word[position] = not self.word[position]
        return False, position
