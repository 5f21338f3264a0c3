# file: src/hamming_codec/__init__.py

"""
Hamming Codec

Single-error-correcting Hamming code over arbitrary-length bit strings,
with a full audit trail of every encode/decode: step log, parity
contribution table, minimum distance estimate and error location.

Public API:
    - encode(data: str, config=None) -> EncodeResult
    - decode(data: str, config=None) -> DecodeResult
    - is_parity_position(i: int) -> bool
    - required_parity_bits(m: int) -> int
    - affected_positions(n: int, parity_pos: int, rule) -> List[int]
    - parity_value(bits, parity_pos: int, rule) -> int
    - load_config(path=None) -> dict
"""

from .encoder import encode
from .decoder import decode
from .positions import is_parity_position, required_parity_bits, parity_positions, data_positions
from .parity import affected_positions, parity_value, syndrome, REFERENCE_RULE, TEXTBOOK_RULE
from .results import EncodeResult, DecodeResult, ParityTableEntry, ErrorDetail
from .metrics import (
    CodeMetrics,
    code_metrics,
    minimum_distance,
    hamming_distance,
    compute_ber,
    compute_redundancy_overhead,
    code_rate,
)
from .config import load_config, get_default_config
from .errors import (
    HammingError,
    InvalidInputError,
    InvalidInput,
    HammingEncodingError,
    HammingDecodingError,
    HammingConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "encode",
    "decode",
    "is_parity_position",
    "required_parity_bits",
    "parity_positions",
    "data_positions",
    "affected_positions",
    "parity_value",
    "syndrome",
    "REFERENCE_RULE",
    "TEXTBOOK_RULE",
    "EncodeResult",
    "DecodeResult",
    "ParityTableEntry",
    "ErrorDetail",
    "CodeMetrics",
    "code_metrics",
    "minimum_distance",
    "hamming_distance",
    "compute_ber",
    "compute_redundancy_overhead",
    "code_rate",
    "load_config",
    "get_default_config",
    "HammingError",
    "InvalidInputError",
    "InvalidInput",
    "HammingEncodingError",
    "HammingDecodingError",
    "HammingConfigurationError",
]
