"""Pydantic models for the JSON form of NUMERIC wire values.

Used by the command line tool and by the test fixture files. The JSON form
tags each value with a "sign" discriminator:

    {"sign": "positive", "weight": 0, "scale": 3, "digits": [123, 4560]}
    {"sign": "nan"}
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from pgnumeric.constants import INT16_MAX, INT16_MIN, MAX_DIGIT, UINT16_MAX
from pgnumeric.wire import Negative, NotANumber, PgNumeric, Positive

Digit = Annotated[int, Field(ge=0, le=MAX_DIGIT)]
Weight = Annotated[int, Field(ge=INT16_MIN, le=INT16_MAX)]
Scale = Annotated[int, Field(ge=0, le=UINT16_MAX)]


class PositiveModel(BaseModel):
    """JSON form of a Positive wire value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    sign: Literal["positive"] = "positive"
    weight: Weight
    scale: Scale
    digits: list[Digit]


class NegativeModel(BaseModel):
    """JSON form of a Negative wire value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    sign: Literal["negative"] = "negative"
    weight: Weight
    scale: Scale
    digits: list[Digit]


class NotANumberModel(BaseModel):
    """JSON form of the NaN wire value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    sign: Literal["nan"] = "nan"


WireNumericModel = Annotated[
    PositiveModel | NegativeModel | NotANumberModel,
    Field(discriminator="sign"),
]

_wire_adapter: TypeAdapter[PositiveModel | NegativeModel | NotANumberModel] = TypeAdapter(
    WireNumericModel
)


class NumericCase(BaseModel):
    """A Decimal literal paired with its expected wire value.

    Attributes:
        value: Decimal literal as text (e.g. "-123.456")
        wire: Expected wire value
        note: Optional free-form description
    """

    model_config = ConfigDict(frozen=True)

    value: str
    wire: WireNumericModel
    note: str | None = None


def to_model(numeric: PgNumeric) -> PositiveModel | NegativeModel | NotANumberModel:
    """Convert a wire value to its pydantic model."""
    match numeric:
        case Positive():
            return PositiveModel(
                weight=numeric.weight, scale=numeric.scale, digits=list(numeric.digits)
            )
        case Negative():
            return NegativeModel(
                weight=numeric.weight, scale=numeric.scale, digits=list(numeric.digits)
            )
        case NotANumber():
            return NotANumberModel()
        case _:
            raise TypeError(f"Expected a wire value, got {type(numeric).__name__}")


def from_model(model: PositiveModel | NegativeModel | NotANumberModel) -> PgNumeric:
    """Convert a pydantic model back to a wire value."""
    match model:
        case PositiveModel():
            return Positive(weight=model.weight, scale=model.scale, digits=model.digits)
        case NegativeModel():
            return Negative(weight=model.weight, scale=model.scale, digits=model.digits)
        case NotANumberModel():
            return NotANumber()
        case _:
            raise TypeError(f"Expected a wire model, got {type(model).__name__}")


def wire_to_dict(numeric: PgNumeric) -> dict[str, Any]:
    """Dump a wire value to a JSON-compatible dict."""
    return to_model(numeric).model_dump()


def wire_from_dict(data: Any) -> PgNumeric:
    """Validate a JSON-compatible dict and build the wire value.

    Raises:
        pydantic.ValidationError: If data is not a valid wire value
    """
    return from_model(_wire_adapter.validate_python(data))


def wire_from_json(text: str | bytes) -> PgNumeric:
    """Parse a JSON document into a wire value."""
    return from_model(_wire_adapter.validate_json(text))


__all__ = [
    "PositiveModel",
    "NegativeModel",
    "NotANumberModel",
    "WireNumericModel",
    "NumericCase",
    "to_model",
    "from_model",
    "wire_to_dict",
    "wire_from_dict",
    "wire_from_json",
]
