"""
Keyed SipHash-c-d for Python byte strings and columnar data.
"""

import logging

from .errors import (
    InternalExtractionFailure,
    InvalidKeyLength,
    InvalidRoundCount,
    SipHashError,
)
from .params import SIPHASH_1_3, SIPHASH_2_4, SipHashParams
from .siphash import SipHash, sip_round, siphash, siphash_1_3, siphash_2_4, siphash_digest
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SipHash",
    "SipHashParams",
    "SIPHASH_1_3",
    "SIPHASH_2_4",
    "siphash",
    "siphash_1_3",
    "siphash_2_4",
    "siphash_digest",
    "sip_round",
    "SipHashError",
    "InvalidKeyLength",
    "InvalidRoundCount",
    "InternalExtractionFailure",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
