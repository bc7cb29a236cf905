"""Pydantic models for stored records and their request shapes.

Each entity has three models:

- the stored record (carries ``id``),
- a creation request (every attribute required, no ``id``),
- an update request (every attribute optional, no ``id``).

Field constraints on the request models are the adapters' pre-validation.
Services never re-check them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

CARD_NUMBER_LENGTH = 9

# Largest value an INTEGER column holds (signed 64-bit).
INT_MAX = 2**63 - 1

_REQUEST_CONFIG = ConfigDict(frozen=True, extra="forbid")


class Record(BaseModel):
    """Base for stored records: a positive integer id, immutable."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1, le=INT_MAX)


# --- Employee ---


class Employee(Record):
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int


class EmployeeCreate(BaseModel):
    model_config = _REQUEST_CONFIG

    card_number_id: str = Field(min_length=CARD_NUMBER_LENGTH, max_length=CARD_NUMBER_LENGTH)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    warehouse_id: int = Field(gt=0, le=INT_MAX)


class EmployeeUpdate(BaseModel):
    model_config = _REQUEST_CONFIG

    card_number_id: str | None = Field(
        default=None, min_length=CARD_NUMBER_LENGTH, max_length=CARD_NUMBER_LENGTH
    )
    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    warehouse_id: int | None = Field(default=None, gt=0, le=INT_MAX)


# --- Section ---


class Section(Record):
    section_number: int
    current_temperature: float
    minimum_temperature: float
    current_capacity: int
    minimum_capacity: int
    maximum_capacity: int
    warehouse_id: int
    product_type_id: int


class SectionCreate(BaseModel):
    model_config = _REQUEST_CONFIG

    section_number: int = Field(gt=0, le=INT_MAX)
    current_temperature: float
    minimum_temperature: float
    current_capacity: int = Field(ge=0, le=INT_MAX)
    minimum_capacity: int = Field(ge=0, le=INT_MAX)
    maximum_capacity: int = Field(gt=0, le=INT_MAX)
    warehouse_id: int = Field(gt=0, le=INT_MAX)
    product_type_id: int = Field(gt=0, le=INT_MAX)


class SectionUpdate(BaseModel):
    model_config = _REQUEST_CONFIG

    section_number: int | None = Field(default=None, gt=0, le=INT_MAX)
    current_temperature: float | None = None
    minimum_temperature: float | None = None
    current_capacity: int | None = Field(default=None, ge=0, le=INT_MAX)
    minimum_capacity: int | None = Field(default=None, ge=0, le=INT_MAX)
    maximum_capacity: int | None = Field(default=None, gt=0, le=INT_MAX)
    warehouse_id: int | None = Field(default=None, gt=0, le=INT_MAX)
    product_type_id: int | None = Field(default=None, gt=0, le=INT_MAX)


# --- Product ---


class Product(Record):
    product_code: str
    description: str
    expiration_rate: int
    freezing_rate: int
    height: float
    length: float
    net_weight: float
    recommended_freezing_temperature: float
    width: float
    product_type_id: int
    seller_id: int


class ProductCreate(BaseModel):
    model_config = _REQUEST_CONFIG

    product_code: str = Field(min_length=1)
    description: str = Field(min_length=1)
    expiration_rate: int = Field(gt=0, le=INT_MAX)
    freezing_rate: int = Field(gt=0, le=INT_MAX)
    height: float = Field(gt=0)
    length: float = Field(gt=0)
    net_weight: float = Field(gt=0)
    recommended_freezing_temperature: float
    width: float = Field(gt=0)
    product_type_id: int = Field(gt=0, le=INT_MAX)
    seller_id: int = Field(gt=0, le=INT_MAX)


class ProductUpdate(BaseModel):
    model_config = _REQUEST_CONFIG

    product_code: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    expiration_rate: int | None = Field(default=None, gt=0, le=INT_MAX)
    freezing_rate: int | None = Field(default=None, gt=0, le=INT_MAX)
    height: float | None = Field(default=None, gt=0)
    length: float | None = Field(default=None, gt=0)
    net_weight: float | None = Field(default=None, gt=0)
    recommended_freezing_temperature: float | None = None
    width: float | None = Field(default=None, gt=0)
    product_type_id: int | None = Field(default=None, gt=0, le=INT_MAX)
    seller_id: int | None = Field(default=None, gt=0, le=INT_MAX)
