from typing import List, Optional, Sequence

# The tags column never shrinks below this while the title still has room.
MIN_COLUMN_WIDTH = 8


def column_widths(term_width: int, count: int, weights: Optional[Sequence[int]] = None) -> List[int]:
    """Split `term_width` columns between `count` table columns.

    The first column (the title) gets the largest share by default; the
    leftover from integer division goes to it as well.
    """
    if count <= 0:
        return []
    usable = max(0, term_width)
    if weights is None:
        weights = [2] + [1] * (count - 1)
    total_weight = max(1, sum(weights))

    widths = [(usable * w) // total_weight for w in weights]
    widths[0] += usable - sum(widths)

    # Give narrow trailing columns a readable minimum, borrowed from the first.
    for idx in range(1, count):
        deficit = MIN_COLUMN_WIDTH - widths[idx]
        if deficit > 0 and widths[0] - deficit >= MIN_COLUMN_WIDTH:
            widths[idx] += deficit
            widths[0] -= deficit
    return widths

