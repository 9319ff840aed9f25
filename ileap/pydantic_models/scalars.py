"""
Constrained scalar types shared by the PACT and iLEAP models.

Every scalar is a frozen RootModel, so an invalid value fails at
construction with a ``pydantic.ValidationError``:

    >>> ISO3166CC("DE").root
    'DE'
    >>> ISO3166CC("us")
    Traceback (most recent call last):
    ...
    pydantic_core._pydantic_core.ValidationError: 1 validation error for ISO3166CC

Decimal scalars travel as JSON strings. A JSON number where a decimal string
is expected is rejected instead of being coerced through a float.
"""
import re
from decimal import Decimal
from typing import Annotated, Any, TypeVar
from uuid import UUID

from pydantic import (
    AfterValidator,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    RootModel,
    WithJsonSchema,
    field_validator,
)

from ileap.pydantic_models.enums import CrossSectoralStandard
from ileap.services.exceptions import PfIdParseError, PfIdVersionError

T = TypeVar("T")

WRAPPED_DECIMAL_PATTERN = r"^-?\d+(\.\d+)?$"
POSITIVE_DECIMAL_PATTERN = r"^\d+(\.\d+)?$"
NEGATIVE_DECIMAL_PATTERN = r"^(-\d+(\.\d+)?|0(\.0+)?)$"
STRICTLY_POSITIVE_DECIMAL_PATTERN = r"^(\d*[1-9]\d*([\.]\d+)?|\d+(\.\d*[1-9]\d*)?)$"


def format_decimal(value: Decimal) -> str:
    """
    Render a decimal in fixed-point notation.

    Example:
        >>> format_decimal(Decimal("1E+3"))
        '1000'
    """
    if value == 0:
        return "0"
    return format(value, "f")


def decimal_string(pattern: str):
    """
    Build a Decimal type whose wire form is a string matching ``pattern``.

    Args:
        pattern: Regular expression the JSON string must match

    Returns:
        Annotated Decimal type with validation, serialization and schema
    """
    compiled = re.compile(pattern)

    def check_encoding(value: Any) -> Any:
        # bool is an int subclass, reject it along with real numbers
        if isinstance(value, (bool, int, float)):
            raise ValueError("decimal values must be encoded as strings")
        if isinstance(value, str) and not compiled.fullmatch(value):
            raise ValueError(f"{value!r} does not match {pattern}")
        return value

    return Annotated[
        Decimal,
        BeforeValidator(check_encoding),
        PlainSerializer(format_decimal, return_type=str, when_used="json"),
        WithJsonSchema({"type": "string", "pattern": pattern}),
    ]


def ensure_unique(items: list) -> list:
    """Reject lists that repeat an element."""
    for index, item in enumerate(items):
        if item in items[:index]:
            raise ValueError(f"duplicate entry {item}")
    return items


NonEmptyList = Annotated[list[T], Field(min_length=1)]
UniqueList = Annotated[
    list[T],
    Field(json_schema_extra={"uniqueItems": True}),
    AfterValidator(ensure_unique),
]
UniqueNonEmptyList = Annotated[
    list[T],
    Field(min_length=1, json_schema_extra={"uniqueItems": True}),
    AfterValidator(ensure_unique),
]


class FrozenRootModel(RootModel[T]):
    """Immutable single-value model."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


# Strings
class NonEmptyString(FrozenRootModel[Annotated[str, Field(min_length=1)]]):
    pass


class Urn(FrozenRootModel[Annotated[str, Field(pattern=r"^([uU][rR][nN]):")]]):
    pass


class ISO3166CC(FrozenRootModel[Annotated[str, Field(pattern=r"^[A-Z]{2}$")]]):
    """ISO 3166-1 alpha-2 country code."""


class SpecVersionString(
    FrozenRootModel[
        Annotated[str, Field(min_length=5, pattern=r"^\d+\.\d+\.\d+(-\d{8})?$")]
    ]
):
    pass


class IpccCharacterizationFactorsSource(
    FrozenRootModel[Annotated[str, Field(pattern=r"^AR\d+$")]]
):
    pass


class IataCode(FrozenRootModel[Annotated[str, Field(max_length=3)]]):
    pass


class Locode(FrozenRootModel[Annotated[str, Field(min_length=5, max_length=5)]]):
    """UN/LOCODE location code."""


class UicCode(FrozenRootModel[Annotated[str, Field(min_length=2, max_length=2)]]):
    """UIC railway country code."""


# Identifiers
class PfId(FrozenRootModel[UUID]):
    """Product footprint identifier, always a version 4 UUID."""

    @field_validator("root")
    @classmethod
    def check_version(cls, value: UUID) -> UUID:
        if value.version != 4:
            raise ValueError(f"expected a version 4 UUID, got version {value.version}")
        return value

    @classmethod
    def parse(cls, text: str) -> "PfId":
        """
        Parse an externally supplied identifier.

        Args:
            text: Identifier as received, e.g. from a URL path

        Returns:
            The parsed PfId

        Raises:
            PfIdParseError: If ``text`` is not a UUID
            PfIdVersionError: If ``text`` is a UUID of another version
        """
        try:
            value = UUID(text)
        except ValueError as e:
            raise PfIdParseError(text) from e
        if value.version != 4:
            raise PfIdVersionError(text, value.version)
        return cls(value)


# Decimals
class WrappedDecimal(FrozenRootModel[decimal_string(WRAPPED_DECIMAL_PATTERN)]):
    pass


class PositiveDecimal(FrozenRootModel[decimal_string(POSITIVE_DECIMAL_PATTERN)]):
    @field_validator("root")
    @classmethod
    def check_sign(cls, value: Decimal) -> Decimal:
        if not value.is_finite() or value < 0:
            raise ValueError("must be zero or greater")
        return value


class NegativeDecimal(FrozenRootModel[decimal_string(NEGATIVE_DECIMAL_PATTERN)]):
    @field_validator("root")
    @classmethod
    def check_sign(cls, value: Decimal) -> Decimal:
        if not value.is_finite() or value > 0:
            raise ValueError("must be zero or less")
        return value


class StrictlyPositiveDecimal(
    FrozenRootModel[decimal_string(STRICTLY_POSITIVE_DECIMAL_PATTERN)]
):
    @field_validator("root")
    @classmethod
    def check_sign(cls, value: Decimal) -> Decimal:
        if not value.is_finite() or value <= 0:
            raise ValueError("must be greater than zero")
        return value


# Bounded numbers
class Percent(
    FrozenRootModel[Annotated[float, Field(strict=True, ge=0, le=100)]]
):
    pass


class ExemptedEmissionsPercent(
    FrozenRootModel[Annotated[float, Field(strict=True, ge=0, le=5)]]
):
    pass


class FloatBetween1and3(
    FrozenRootModel[Annotated[float, Field(strict=True, ge=1, le=3)]]
):
    pass


class GlecDataQualityIndex(
    FrozenRootModel[Annotated[int, Field(strict=True, ge=0, le=4)]]
):
    pass


class VersionInteger(
    FrozenRootModel[Annotated[int, Field(strict=True, ge=1, le=2**31 - 1)]]
):
    pass


# Sets
CompanyIdSet = UniqueNonEmptyList[Urn]
ProductIdSet = UniqueNonEmptyList[Urn]
NonEmptyPfIdList = UniqueNonEmptyList[PfId]
IpccCharacterizationFactorsSources = UniqueNonEmptyList[IpccCharacterizationFactorsSource]
CrossSectoralStandardSet = UniqueNonEmptyList[CrossSectoralStandard]
NonEmptyStringList = NonEmptyList[NonEmptyString]
