"""Constant-time rank queries over a bit vector."""

from dataclasses import dataclass

from algokit.bit_vector import BitVector
from algokit.bits import popcount

_BLOCKS_PER_SUPER = 8
_RANK_WIDTH = 9
_RANK_MASK = (1 << _RANK_WIDTH) - 1


@dataclass
class _SuperBlock:
    start_rank: int = 0
    # Ranks of blocks 1..7 relative to start_rank, 9 bits each.
    other_ranks: int = 0


class RankSelectTable:
    """Rank index over a BitVector, grouping blocks into super-blocks of eight.

    The table refers to the bit vector; it must not change afterwards.
    """

    def __init__(self, bits: BitVector) -> None:
        self._bits = bits
        num_blocks = bits.num_blocks()
        self._super_blocks = [_SuperBlock() for _ in range(num_blocks // _BLOCKS_PER_SUPER + 1)]

        rank = 0
        for i in range(num_blocks):
            super_index, super_offset = divmod(i + 1, _BLOCKS_PER_SUPER)
            rank += popcount(bits.block(i))
            if super_index >= len(self._super_blocks):
                continue
            sb = self._super_blocks[super_index]
            if super_offset == 0:
                sb.start_rank = rank
            else:
                sb.other_ranks |= (rank - sb.start_rank) << (_RANK_WIDTH * (super_offset - 1))

    def rank0(self, n: int) -> int:
        """Number of zeroes among the first ``n`` bits."""
        return n - self.rank1(n)

    def rank1(self, n: int) -> int:
        """Number of ones among the first ``n`` bits."""
        if not 0 <= n <= len(self._bits):
            raise IndexError(f"position {n} out of range for {len(self._bits)} bits")
        block, block_offset = divmod(n, 64)
        super_index, super_offset = divmod(block, _BLOCKS_PER_SUPER)
        sb = self._super_blocks[super_index]

        rank = sb.start_rank
        if super_offset:
            rank += sb.other_ranks >> (_RANK_WIDTH * (super_offset - 1)) & _RANK_MASK
        mask = (1 << block_offset) - 1
        return rank + popcount(self._bits.block(block) & mask)