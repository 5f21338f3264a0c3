# file: src/hamming_codec/metrics.py

"""
Hamming code metrics.

Provides the minimum-distance estimate reported by the encoder, the
detection/correction capacity derived from it, and utilities to compare
bit strings (Hamming distance, Bit Error Rate) and size codes (redundancy
overhead, code rate).
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .bitstring import parse_bits
from .errors import InvalidInputError


@dataclass(frozen=True)
class CodeMetrics:
    """Distance and capacity figures for a payload length."""
    payload_length: int
    min_distance: int
    detectable_errors: int
    correctable_errors: int


def minimum_distance(payload_length: int) -> int:
    """
    Minimum Hamming distance reported for a payload of the given length.

    d = floor(log2(m)) + 1

    This is a simplified estimate tied to payload length, not the true
    minimum distance of the generated code (which is 3 for any Hamming code).
    It is what the codec reports, so it is kept as is.

    Args:
        payload_length: m (>= 1)

    Returns:
        d (>= 1)

    Raises:
        InvalidInputError: If payload_length < 1

    Example:
        >>> minimum_distance(4)
        3
    """
    if payload_length < 1:
        raise InvalidInputError(f"Payload length must be >= 1, got {payload_length}")

    # bit_length() - 1 == floor(log2(m)) without float rounding
    return payload_length.bit_length()


def detectable_errors(min_distance: int) -> int:
    """Number of bit errors a code of distance d can detect: d - 1."""
    return min_distance - 1


def correctable_errors(min_distance: int) -> int:
    """Number of bit errors a code of distance d can correct: floor((d - 1) / 2)."""
    return (min_distance - 1) // 2


def code_metrics(payload_length: int) -> CodeMetrics:
    """
    All encoder-side metrics for a payload length.

    Example:
        >>> code_metrics(4)
        CodeMetrics(payload_length=4, min_distance=3, detectable_errors=2, correctable_errors=1)
    """
    d = minimum_distance(payload_length)
    return CodeMetrics(
        payload_length=payload_length,
        min_distance=d,
        detectable_errors=detectable_errors(d),
        correctable_errors=correctable_errors(d),
    )


def hamming_distance(first: str, second: str) -> Optional[int]:
    """
    Number of positions at which two bit strings differ.

    Args:
        first: Bit string
        second: Bit string

    Returns:
        Distance, or None if the strings have different lengths

    Raises:
        InvalidInputError: If either string is not a valid bit string
    """
    if len(first) != len(second):
        return None

    return int(np.count_nonzero(parse_bits(first) != parse_bits(second)))


def compute_ber(original: str, received: str) -> float:
    """
    Compute Bit Error Rate (BER) between two bit strings.

    BER = (number of bit errors) / (total number of bits)

    Args:
        original: Transmitted bit string
        received: Received (possibly corrupted) bit string

    Returns:
        BER as a float in [0.0, 1.0]

    Raises:
        ValueError: If inputs have different lengths

    Example:
        >>> compute_ber("0000", "0100")
        0.25
    """
    if len(original) != len(received):
        raise ValueError(
            f"Length mismatch: original={len(original)}, received={len(received)}"
        )

    if len(original) == 0:
        return 0.0

    return hamming_distance(original, received) / len(original)


def compute_redundancy_overhead(payload_length: int, codeword_length: int) -> float:
    """
    Compute redundancy overhead as a percentage.

    Overhead = ((codeword_length - payload_length) / payload_length) * 100

    Example:
        >>> compute_redundancy_overhead(4, 7)
        75.0
    """
    if payload_length <= 0:
        raise ValueError(f"payload_length must be > 0, got {payload_length}")

    if codeword_length < payload_length:
        raise ValueError(
            f"codeword_length {codeword_length} < payload_length {payload_length}"
        )

    return ((codeword_length - payload_length) / payload_length) * 100.0


def code_rate(payload_length: int, codeword_length: int) -> float:
    """
    Calculate code rate k / n.

    Example:
        >>> round(code_rate(4, 7), 3)
        0.571
    """
    if codeword_length <= 0:
        raise ValueError(f"codeword_length must be > 0, got {codeword_length}")

    return payload_length / codeword_length
