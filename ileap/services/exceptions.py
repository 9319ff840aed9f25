"""
Domain exceptions.
"""


class IleapError(Exception):
    """Base class for errors raised by the iLEAP data model."""
    pass


class InvalidPfIdError(IleapError, ValueError):
    """
    Raised when a product footprint identifier cannot be accepted.

    Carries the offending text so HTTP handlers can echo it back.
    """

    def __init__(self, value: str, message: str):
        self.value = value
        self.message = message
        super().__init__(f"Invalid product footprint id {value!r}: {message}")


class PfIdParseError(InvalidPfIdError):
    """Raised when the identifier is not a UUID at all."""

    def __init__(self, value: str):
        super().__init__(value, "not a UUID")


class PfIdVersionError(InvalidPfIdError):
    """Raised when the identifier is a UUID of a version other than 4."""

    def __init__(self, value: str, version: int | None):
        self.version = version
        super().__init__(value, f"expected a version 4 UUID, got version {version}")


class UnsupportedThroughputUnitError(IleapError):
    """
    Raised when a HOC declares its intensity per TEU.

    Mapping a TEU-based intensity onto a kilogram-declared footprint needs a
    TEU to mass conversion, which is not defined yet.
    """

    def __init__(self, hoc_id: str, throughput: str):
        self.hoc_id = hoc_id
        self.throughput = throughput
        super().__init__(
            f"HOC {hoc_id} declares co2eIntensityThroughput={throughput!r}; "
            f"only 'tonnes' can be mapped to a product footprint"
        )


class OffsetOutOfRangeError(IleapError):
    """Raised when a listing is requested past its last element."""

    def __init__(self, offset: int, total: int):
        self.offset = offset
        self.total = total
        super().__init__(f"Offset {offset} exceeds the {total} available records")
