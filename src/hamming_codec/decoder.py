# file: src/hamming_codec/decoder.py

"""
Hamming decoding entry point.

Provides decode() with syndrome-based single-bit correction. An error
position outside the codeword is reported in the result, never raised.
"""

import logging
from typing import Any, Dict, Optional

import numpy as np

from .bitstring import format_bits, parse_bits
from .config import resolve_codec_options
from .errors import HammingDecodingError, HammingError
from .messages import StepLog
from .parity import affected_positions, parity_value
from .positions import data_positions, parity_positions
from .results import DecodeResult, ErrorDetail, ParityTableEntry

logger = logging.getLogger(__name__)


def decode(data: str, config: Optional[Dict[str, Any]] = None) -> DecodeResult:
    """
    Decode a received codeword, correcting at most one flipped bit.

    Every parity check is recomputed over the received word; the positions
    of the failing checks add up to the error position.

    Args:
        data: Received codeword, a non-empty string of '0'/'1' characters
        config: Optional configuration dictionary with a 'hamming' section

    Returns:
        DecodeResult. Outcomes:
            - syndrome 0: decoded_data set, error False, error_details None
            - syndrome in 1..n: bit corrected, decoded_data set, error False,
              error_details holds original and corrected codewords
            - syndrome > n: decoded_data None, error True, error_details
              with corrected_data None

    Raises:
        InvalidInputError: If data is empty or not a '0'/'1' string
        HammingConfigurationError: If configuration is invalid
        HammingDecodingError: If decoding fails unexpectedly

    Note:
        Two or more flipped bits can yield a syndrome that points at the
        wrong bit or inside the codeword; single-error-correcting codes
        cannot tell these apart.
    """
    bits = parse_bits(data)
    position_rule, language = resolve_codec_options(config)

    try:
        return _decode_hamming(data, bits, position_rule, language)
    except HammingError:
        raise
    except Exception as e:
        raise HammingDecodingError(f"Hamming decoding failed: {e}") from e


def _decode_hamming(
    data: str,
    received: np.ndarray,
    position_rule: str,
    language: str
) -> DecodeResult:
    steps = StepLog(language)
    steps.add('received_data', data=data)

    n = len(received)
    error_position = 0
    parity_table = []

    for parity_pos in parity_positions(n):
        value = parity_value(received, parity_pos, position_rule)
        steps.add('parity_checked', position=parity_pos, value=value)
        if value != 0:
            error_position += parity_pos

        parity_table.append(ParityTableEntry(
            parity_position=parity_pos,
            affected_positions=tuple(affected_positions(n, parity_pos, position_rule)),
            parity_value=value,
        ))

    if error_position > n:
        steps.add('out_of_bounds', position=error_position)
        logger.warning(
            "Syndrome %d exceeds codeword length %d; cannot correct", error_position, n
        )
        return DecodeResult(
            decoded_data=None,
            steps=steps.freeze(),
            parity_table=tuple(parity_table),
            error=True,
            error_details=ErrorDetail(position=error_position, original_data=data),
        )

    corrected = received.copy()
    error_details = None
    if error_position != 0:
        corrected[error_position - 1] ^= 1
        corrected_data = format_bits(corrected)
        steps.add('error_detected', position=error_position)
        steps.add('original_data', data=data)
        steps.add('corrected_data', data=corrected_data)
        logger.info("Corrected bit %d of %d-bit codeword", error_position, n)
        error_details = ErrorDetail(
            position=error_position,
            original_data=data,
            corrected_data=corrected_data,
        )
    else:
        steps.add('no_error')

    payload = corrected[np.array(data_positions(n), dtype=np.intp) - 1]

    return DecodeResult(
        decoded_data=format_bits(payload),
        steps=steps.freeze(),
        parity_table=tuple(parity_table),
        error=False,
        error_details=error_details,
    )
