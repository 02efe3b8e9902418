"""
Core math modules для septem

Алгоритмы кодирования и декодирования римских чисел.
"""

# Encoder
from septem.core.math.encoder import (
    DENOMINATIONS,
    encode,
    encode_to_str,
)

# Decoder
from septem.core.math.decoder import (
    decode,
    decode_digits,
)

__all__ = [
    # Encoder
    "DENOMINATIONS",
    "encode",
    "encode_to_str",
    # Decoder
    "decode",
    "decode_digits",
]
