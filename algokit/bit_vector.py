"""Fixed-size bit vector stored in 64-bit blocks."""

from algokit.bits import WORD_MASK


class BitVector:
    """A fixed number of bits packed into 64-bit blocks.

    When the number of bits is a multiple of 64 there is one extra zero
    block, so that the position just after the last bit still has a block.
    """

    def __init__(self, num_bits: int) -> None:
        if num_bits < 0:
            raise ValueError("number of bits must be non-negative")
        self._num_bits = num_bits
        num_blocks = (num_bits + 63) // 64 + (num_bits % 64 == 0)
        self._blocks = [0] * num_blocks

    def _locate(self, bit: int) -> tuple[int, int]:
        if not 0 <= bit < self._num_bits:
            raise IndexError(f"bit {bit} out of range for {self._num_bits} bits")
        return divmod(bit, 64)

    def set(self, bit: int) -> None:
        block, offset = self._locate(bit)
        self._blocks[block] |= 1 << offset

    def clear(self, bit: int) -> None:
        block, offset = self._locate(bit)
        self._blocks[block] &= ~(1 << offset) & WORD_MASK

    def test(self, bit: int) -> bool:
        block, offset = self._locate(bit)
        return bool(self._blocks[block] >> offset & 1)

    def block(self, index: int) -> int:
        """The 64-bit block with the given index."""
        if not 0 <= index < len(self._blocks):
            raise IndexError(f"block {index} out of range")
        return self._blocks[index]

    def num_blocks(self) -> int:
        return len(self._blocks)

    def __len__(self) -> int:
        return self._num_bits