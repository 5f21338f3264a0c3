# file: src/hamming_codec/positions.py

"""
Bit position classification.

Positions are 1-based. Positions that are exact powers of two (1, 2, 4, 8, ...)
carry parity bits; every other position carries a payload bit.
"""

from typing import List

from .errors import InvalidInputError


def is_parity_position(position: int) -> bool:
    """
    Check whether a 1-based position holds a parity bit.

    Args:
        position: 1-based bit position (>= 1)

    Returns:
        True iff position is an exact power of two

    Raises:
        InvalidInputError: If position < 1
    """
    if position < 1:
        raise InvalidInputError(f"Bit positions are 1-based, got {position}")

    return position & (position - 1) == 0


def required_parity_bits(m: int) -> int:
    """
    Number of parity bits needed to protect m payload bits.

    Smallest r such that 2**r >= m + r + 1, found by counting up from 1.

    Args:
        m: Payload length in bits (>= 1)

    Returns:
        r (>= 1)

    Raises:
        InvalidInputError: If m < 1 (empty payloads are not supported)

    Example:
        >>> required_parity_bits(4)
        3
    """
    if m < 1:
        raise InvalidInputError(f"Payload length must be >= 1, got {m}")

    r = 1
    while 2 ** r < m + r + 1:
        r += 1
    return r


def parity_positions(length: int) -> List[int]:
    """Ascending parity positions (powers of two) not exceeding length."""
    positions = []
    position = 1
    while position <= length:
        positions.append(position)
        position *= 2
    return positions


def data_positions(length: int) -> List[int]:
    """Ascending payload positions in 1..length."""
    return [i for i in range(1, length + 1) if not is_parity_position(i)]
