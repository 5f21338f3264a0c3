# file: src/hamming_codec/testing_utils.py

"""
Testing utilities for the Hamming codec.

Provides error injection for validation and robustness testing.
Used only in test/evaluation contexts.
"""

import random
from typing import List, Optional, Tuple

from .bitstring import format_bits, parse_bits
from .errors import InvalidInputError


def flip_bit(data: str, position: int) -> str:
    """
    Flip a single bit of a bit string.

    Args:
        data: Bit string
        position: 1-based position to flip

    Returns:
        Bit string with that position inverted

    Example:
        >>> flip_bit("1111011", 5)
        '1111111'
    """
    bits = parse_bits(data)
    if not 1 <= position <= len(bits):
        raise InvalidInputError(
            f"Position {position} outside 1..{len(bits)}", value=data, index=position
        )

    bits[position - 1] ^= 1
    return format_bits(bits)


def inject_bit_errors(
    data: str,
    num_errors: int,
    seed: Optional[int] = None
) -> Tuple[str, List[int]]:
    """
    Flip num_errors distinct, randomly chosen bits.

    Uses a private random.Random so seeding does not touch global state.

    Args:
        data: Bit string
        num_errors: Number of distinct positions to flip
        seed: Random seed for reproducibility (optional)

    Returns:
        (corrupted bit string, ascending 1-based flipped positions)
    """
    bits = parse_bits(data)
    if not 0 <= num_errors <= len(bits):
        raise ValueError(f"num_errors must be in [0, {len(bits)}], got {num_errors}")

    rng = random.Random(seed)
    positions = sorted(rng.sample(range(1, len(bits) + 1), num_errors))

    for position in positions:
        bits[position - 1] ^= 1

    return format_bits(bits), positions
