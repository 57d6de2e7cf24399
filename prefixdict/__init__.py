from prefixdict import utils
from prefixdict.logger import with_logging

__all__ = (
    "IGNORE_CASE",
    "ORDINAL",
    "InvalidArgumentError",
    "InvalidKeyTypeError",
    "KeyComparer",
    "KeyNotFoundError",
    "NullKeyError",
    "PrefixDictError",
    "RadixDictionary",
    "RadixNode",
    "utils",
    "with_logging",
)

from prefixdict.core.dictionary import RadixDictionary
from prefixdict.core.node import RadixNode
from prefixdict.errors import (
    InvalidArgumentError,
    InvalidKeyTypeError,
    KeyNotFoundError,
    NullKeyError,
    PrefixDictError,
)
from prefixdict.utils.comparison import IGNORE_CASE, ORDINAL, KeyComparer
