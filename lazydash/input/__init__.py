"""Input-layer public API for key and mouse decoding."""

from .reader import (
    ESC_SEQUENCE_TIMEOUT_MS,
    decode_sgr_mouse,
    parse_sgr_payload,
    read_key,
)

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "decode_sgr_mouse",
    "parse_sgr_payload",
    "read_key",
]
