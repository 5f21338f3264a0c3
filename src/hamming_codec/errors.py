# file: src/hamming_codec/errors.py

"""
Hamming codec exception hierarchy.

All exceptions inherit from HammingError for unified handling.

An uncorrectable syndrome is NOT an exception: the decoder reports it as
data (``DecodeResult.error``) so callers can render it.
"""


class HammingError(Exception):
    """Base exception for all Hamming codec errors."""
    pass


class InvalidInputError(HammingError, ValueError):
    """Raised when a bit string is empty, not a string, or not made of '0'/'1'."""

    def __init__(self, message: str, value=None, index: int = None):
        super().__init__(message)
        self.value = value
        self.index = index


# Short name used by callers that follow the error taxonomy literally
InvalidInput = InvalidInputError


class HammingEncodingError(HammingError):
    """Raised when encoding fails unexpectedly."""
    pass


class HammingDecodingError(HammingError):
    """Raised when decoding fails unexpectedly."""
    pass


class HammingConfigurationError(HammingError):
    """Raised when codec configuration is invalid."""
    pass
