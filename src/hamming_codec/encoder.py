# file: src/hamming_codec/encoder.py

"""
Hamming encoding entry point.

Provides encode() which turns a payload bit string into a codeword and
records every decision taken along the way.
"""

import logging
from typing import Any, Dict, Optional

import numpy as np

from .bitstring import format_bits, parse_bits
from .config import resolve_codec_options
from .errors import HammingEncodingError, HammingError
from .messages import StepLog
from .metrics import code_metrics
from .parity import affected_positions, parity_value
from .positions import is_parity_position, required_parity_bits
from .results import EncodeResult, ParityTableEntry

logger = logging.getLogger(__name__)


def encode(data: str, config: Optional[Dict[str, Any]] = None) -> EncodeResult:
    """
    Encode a payload bit string with a single-error-correcting Hamming code.

    Parity bits occupy the power-of-two positions (1, 2, 4, ...) of the
    codeword; payload bits fill the remaining positions in order.

    Args:
        data: Payload, a non-empty string of '0'/'1' characters
        config: Optional configuration dictionary with a 'hamming' section

    Returns:
        EncodeResult with the codeword, step log, parity table and the
        minimum distance estimate

    Raises:
        InvalidInputError: If data is empty or not a '0'/'1' string
        HammingConfigurationError: If configuration is invalid
        HammingEncodingError: If encoding fails unexpectedly

    Example:
        >>> result = encode("1011")
        >>> len(result.encoded_data), result.hamming_distance
        (7, 3)
    """
    bits = parse_bits(data)
    position_rule, language = resolve_codec_options(config)

    try:
        return _encode_hamming(data, bits, position_rule, language)
    except HammingError:
        raise
    except Exception as e:
        raise HammingEncodingError(f"Hamming encoding failed: {e}") from e


def _encode_hamming(
    data: str,
    data_bits: np.ndarray,
    position_rule: str,
    language: str
) -> EncodeResult:
    steps = StepLog(language)
    steps.add('input_data', data=data)

    m = len(data_bits)
    r = required_parity_bits(m)
    n = m + r
    steps.add('payload_length', m=m)
    steps.add('parity_bits_needed', r=r)
    logger.debug("Encoding %d payload bits with %d parity bits (%s rule)", m, r, position_rule)

    # Lay out payload bits around zeroed parity slots
    codeword = np.zeros(n, dtype=np.uint8)
    next_bit = 0
    for position in range(1, n + 1):
        if is_parity_position(position):
            steps.add('parity_placeholder', position=position)
        else:
            codeword[position - 1] = data_bits[next_bit]
            next_bit += 1

    parity_table = []
    for i in range(r):
        parity_pos = 2 ** i
        positions = affected_positions(n, parity_pos, position_rule)
        value = parity_value(codeword, parity_pos, position_rule)
        codeword[parity_pos - 1] = value

        steps.add('parity_computed', position=parity_pos, value=value)
        parity_table.append(ParityTableEntry(
            parity_position=parity_pos,
            affected_positions=tuple(positions),
            parity_value=value,
        ))
        logger.debug("Parity %d over %s = %d", parity_pos, positions, value)

    metrics = code_metrics(m)
    steps.add('min_distance', distance=metrics.min_distance)
    steps.add(
        'capability',
        detectable=metrics.detectable_errors,
        correctable=metrics.correctable_errors,
    )

    return EncodeResult(
        encoded_data=format_bits(codeword),
        steps=steps.freeze(),
        parity_table=tuple(parity_table),
        hamming_distance=metrics.min_distance,
    )
