# file: src/hamming_codec/results.py

"""
Result types returned by encode() and decode().

to_dict() renders the wire format expected by the web front end: camelCase
field names in a fixed order, affected positions joined as "2, 4, 6".
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ParityTableEntry:
    """One row of the parity-contribution table."""
    parity_position: int                  # power of two
    affected_positions: Tuple[int, ...]   # ascending, 1-based
    parity_value: int                     # 0 or 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'parityPos': self.parity_position,
            'affectedBits': ', '.join(str(p) for p in self.affected_positions),
            'parityValue': self.parity_value,
        }


@dataclass(frozen=True)
class ErrorDetail:
    """Where a non-zero syndrome pointed, and what was done about it."""
    position: int
    original_data: str
    corrected_data: Optional[str] = None  # None when out of bounds

    def to_dict(self) -> Dict[str, Any]:
        return {
            'position': self.position,
            'originalData': self.original_data,
            'correctedData': self.corrected_data,
        }


@dataclass(frozen=True)
class EncodeResult:
    """Codeword plus the audit trail of how it was built."""
    encoded_data: str
    steps: Tuple[str, ...]
    parity_table: Tuple[ParityTableEntry, ...]
    hamming_distance: int

    @property
    def detectable_errors(self) -> int:
        return self.hamming_distance - 1

    @property
    def correctable_errors(self) -> int:
        return (self.hamming_distance - 1) // 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            'encodedData': self.encoded_data,
            'steps': list(self.steps),
            'parityTable': [entry.to_dict() for entry in self.parity_table],
            'hammingDistance': self.hamming_distance,
        }


@dataclass(frozen=True)
class DecodeResult:
    """
    Payload recovered from a received codeword.

    error is True only when the syndrome points outside the codeword; then
    decoded_data is None. error_details is set for any non-zero syndrome.
    """
    decoded_data: Optional[str]
    steps: Tuple[str, ...]
    parity_table: Tuple[ParityTableEntry, ...]
    error: bool = False
    error_details: Optional[ErrorDetail] = None

    @property
    def corrected(self) -> bool:
        """True iff a single bit was flipped back in range."""
        return self.error_details is not None and not self.error

    def to_dict(self) -> Dict[str, Any]:
        return {
            'decodedData': self.decoded_data,
            'steps': list(self.steps),
            'parityTable': [entry.to_dict() for entry in self.parity_table],
            'error': self.error,
            'errorDetails': (
                self.error_details.to_dict() if self.error_details is not None else None
            ),
        }
