"""
Input validation schemas using Pydantic for better data integrity.

The share schemas mirror the wire format field for field and reject anything whose
JSON type differs from the documented one (``true`` is not a number, ``1`` is not
a boolean).
"""
import math
import re
from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator

from basket.utilities.config import MAX_TRANSPORT_LENGTH
from basket.utilities.constants import SHARE_VERSION


def is_number(value) -> bool:
    """True for JSON numbers; bool is an int subclass in Python but not a number on the wire."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def well_formed_text(value):
    """Replace lone UTF-16 surrogates (legal in JSON escapes, unencodable as UTF-8) with U+FFFD.

    Non-text values are returned unchanged so type checks still see them.
    """
    if not isinstance(value, str):
        return value
    return _LONE_SURROGATE.sub("\ufffd", value)


def is_finite_number(value) -> bool:
    # ints are always finite (and may be too large for math.isfinite)
    return is_number(value) and (isinstance(value, int) or math.isfinite(value))


class ShareItemInput(BaseModel):
    """Schema for one item of a full (non-compact) share payload."""
    name: StrictStr
    quantity: Union[int, float]
    unit: StrictStr
    category: StrictStr
    comment: StrictStr
    scope: StrictStr
    purchased: StrictBool

    @field_validator('name', 'unit', 'category', 'comment', 'scope', mode='before')
    @classmethod
    def replace_lone_surrogates(cls, v):
        return well_formed_text(v)

    @field_validator('quantity', mode='before')
    @classmethod
    def validate_quantity(cls, v):
        """Any finite number is accepted, zero and negatives included."""
        if not is_finite_number(v):
            raise ValueError('quantity must be a finite number')
        return v


class SharePayloadInput(BaseModel):
    """Schema for a full (non-compact) share payload object."""
    version: int
    list_name: StrictStr = Field(..., alias='listName')
    items: List[ShareItemInput]

    @field_validator('version', mode='before')
    @classmethod
    def validate_version(cls, v):
        if not is_number(v) or v != SHARE_VERSION:
            raise ValueError(f'unsupported share payload version: {v!r}')
        return SHARE_VERSION

    @field_validator('list_name', mode='before')
    @classmethod
    def replace_lone_surrogates(cls, v):
        return well_formed_text(v)


class ListInput(BaseModel):
    """Schema for creating or renaming a list."""
    name: str = Field(..., min_length=1, max_length=200)

    @field_validator('name', mode='before')
    @classmethod
    def replace_lone_surrogates(cls, v):
        return well_formed_text(v)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if not v.strip():
            raise ValueError('List name cannot be empty')
        return v.strip()


class ItemInput(BaseModel):
    """Schema for adding an item to a list."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = 1
    # blank unit or category is inferred from the catalog by name
    unit: str = Field('', max_length=20)
    category: str = Field('', max_length=100)
    comment: str = ''
    scope: str = ''
    purchased: bool = False

    @field_validator('name', 'unit', 'category', 'comment', 'scope', mode='before')
    @classmethod
    def replace_lone_surrogates(cls, v):
        return well_formed_text(v)

    @field_validator('name', 'unit', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v):
        if not math.isfinite(v):
            raise ValueError('Quantity must be finite')
        return int(v) if float(v).is_integer() else v


class ToggleInput(BaseModel):
    purchased: bool


class ShareDecodeInput(BaseModel):
    """Schema for a transport string posted for decoding."""
    payload: str = Field(..., min_length=1, max_length=MAX_TRANSPORT_LENGTH)


class ShareImportInput(BaseModel):
    """Schema for importing a transport string into the list store."""
    payload: str = Field(..., min_length=1, max_length=MAX_TRANSPORT_LENGTH)
    mode: str = Field('new', pattern=r'^(merge|new)$')
    target_list_id: Optional[str] = None
