"""Domain layer: constants, errors and schemas."""

from .errors import ConfigError, ConversionError, DecodeError, TransportError
from .schemas import (
    ConversionOutcome,
    ConversionRequest,
    ConversionResponse,
    OutcomeStatus,
)

__all__ = [
    "ConversionError",
    "TransportError",
    "DecodeError",
    "ConfigError",
    "ConversionRequest",
    "ConversionResponse",
    "ConversionOutcome",
    "OutcomeStatus",
]
