# file: src/hamming_codec/parity.py

"""
Parity group computation.

Each parity bit p covers a group of 1-based codeword positions. Two
membership rules are supported:

    reference: position i is covered iff (i + 1) & p != 0   (default)
    textbook:  position i is covered iff i & p != 0

Both rules only scan positions p..n. The reference rule is the observable
behavior of the codec and its test vectors; the textbook rule yields the
classic syndrome-equals-error-position code.
"""

from typing import List, Sequence, Tuple

import numpy as np

from .errors import HammingConfigurationError
from .positions import parity_positions


REFERENCE_RULE = 'reference'
TEXTBOOK_RULE = 'textbook'

POSITION_RULES = (REFERENCE_RULE, TEXTBOOK_RULE)


def _membership_offset(rule: str) -> int:
    if rule == REFERENCE_RULE:
        return 1
    elif rule == TEXTBOOK_RULE:
        return 0
    else:
        raise HammingConfigurationError(
            f"Unknown position rule: {rule!r} (expected one of {POSITION_RULES})"
        )


def affected_positions(
    codeword_length: int,
    parity_pos: int,
    rule: str = REFERENCE_RULE
) -> List[int]:
    """
    Positions whose bits feed the parity bit at parity_pos.

    Args:
        codeword_length: Total number of bits n
        parity_pos: Parity position (power of two)
        rule: 'reference' or 'textbook'

    Returns:
        Ascending 1-based positions in parity_pos..codeword_length

    Example:
        >>> affected_positions(7, 1)
        [2, 4, 6]
        >>> affected_positions(7, 1, rule='textbook')
        [1, 3, 5, 7]
    """
    offset = _membership_offset(rule)
    return [
        i for i in range(parity_pos, codeword_length + 1)
        if (i + offset) & parity_pos
    ]


def parity_value(
    bits: Sequence[int],
    parity_pos: int,
    rule: str = REFERENCE_RULE
) -> int:
    """
    XOR of the bits at every affected position of parity_pos.

    Args:
        bits: Bit sequence, bits[0] is position 1
        parity_pos: Parity position (power of two)
        rule: 'reference' or 'textbook'

    Returns:
        0 or 1
    """
    positions = affected_positions(len(bits), parity_pos, rule)
    if not positions:
        return 0

    covered = np.asarray(bits, dtype=np.uint8)[np.asarray(positions) - 1]
    return int(np.bitwise_xor.reduce(covered))


def syndrome(
    bits: Sequence[int],
    rule: str = REFERENCE_RULE
) -> List[Tuple[int, int]]:
    """
    Recompute every parity check over a received word.

    Returns:
        (parity_pos, parity_value) pairs, one per parity position <= len(bits)
    """
    return [
        (parity_pos, parity_value(bits, parity_pos, rule))
        for parity_pos in parity_positions(len(bits))
    ]
