"""
WordFormat — Layout Parameters of Word-Buffer Import/Export

Immutable Pydantic model bundling word order, word size, byte order inside a
word and the nails count. NATIVE resolves to the host's byte order; native
word order follows it (least-significant word first on little-endian hosts).
"""

import sys
from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class WordOrder(str, Enum):
    """Order of the words in a buffer"""

    MOST_SIGNIFICANT_FIRST = "most_significant_first"
    LEAST_SIGNIFICANT_FIRST = "least_significant_first"
    NATIVE = "native"


class Endianness(str, Enum):
    """Order of the bytes inside a word"""

    BIG = "big"
    LITTLE = "little"
    NATIVE = "native"


# =============================================================================
# WORD FORMAT MODEL
# =============================================================================


class WordFormat(BaseModel):
    """
    Layout of a word buffer.

    The default (most significant first, 1-byte words, big endian, no nails)
    is a plain big-endian byte string.
    """

    order: WordOrder = Field(WordOrder.MOST_SIGNIFICANT_FIRST, description="Word order")
    size: int = Field(1, gt=0, description="Bytes per word")
    endian: Endianness = Field(Endianness.BIG, description="Byte order inside a word")
    nails: int = Field(0, ge=0, description="High bits per word that carry no value")

    model_config = {"frozen": True}

    @field_validator("nails")
    @classmethod
    def validate_nails_below_word_width(cls, v: int, info) -> int:
        """nails must leave at least one value bit per word"""
        if "size" in info.data:
            size = info.data["size"]
            if v >= size * 8:
                raise ValueError(f"nails {v} must be < word width {size * 8} bits")
        return v

    @property
    def byteorder(self) -> str:
        """Byte order as understood by int.to_bytes."""
        if self.endian == Endianness.NATIVE:
            return sys.byteorder
        return self.endian.value

    @property
    def most_significant_first(self) -> bool:
        if self.order == WordOrder.NATIVE:
            return sys.byteorder == "big"
        return self.order == WordOrder.MOST_SIGNIFICANT_FIRST

    @property
    def value_bits(self) -> int:
        """Bits of value carried by each word."""
        return self.size * 8 - self.nails
