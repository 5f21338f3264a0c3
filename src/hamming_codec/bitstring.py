# file: src/hamming_codec/bitstring.py

"""
Bit string conversion.

Converts between the textual representation used by callers ('0'/'1'
characters) and the 1-D numpy bit arrays the codec works on.
"""

import numpy as np

from .errors import InvalidInputError


def parse_bits(data: str) -> np.ndarray:
    """
    Convert a '0'/'1' string to a bit array.

    Args:
        data: Bit string, first character is position 1

    Returns:
        bits: np.ndarray of shape (N,), dtype uint8, values 0/1

    Raises:
        InvalidInputError: If data is not a string, is empty, or contains
            any character other than '0' and '1'

    Example:
        >>> parse_bits("1011")
        array([1, 0, 1, 1], dtype=uint8)
    """
    if not isinstance(data, str):
        raise InvalidInputError(
            f"Input must be a string of '0'/'1' characters, got {type(data)}",
            value=data,
        )

    if len(data) == 0:
        raise InvalidInputError("Input bit string is empty", value=data)

    for index, char in enumerate(data):
        if char not in ('0', '1'):
            raise InvalidInputError(
                f"Invalid character {char!r} at position {index + 1}: "
                f"only '0' and '1' are allowed",
                value=data,
                index=index + 1,
            )

    return np.frombuffer(data.encode('ascii'), dtype=np.uint8) - ord('0')


def format_bits(bits: np.ndarray) -> str:
    """
    Convert a bit array back to a '0'/'1' string.

    Args:
        bits: Bit array (N,) with 0/1 integers

    Returns:
        String of length N
    """
    if len(bits) == 0:
        return ''

    bits = np.asarray(bits).astype(np.uint8) & 1
    return (bits + ord('0')).tobytes().decode('ascii')
