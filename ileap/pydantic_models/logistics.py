"""
Pydantic models for the iLEAP logistics data types.

ShipmentFootprint, TCE, TOC, HOC and TAD as exchanged in the ``data``
property of a PACT DataModelExtension.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Union

from pydantic import Field, StrictInt, model_validator

from ileap.pydantic_models.base import IleapBaseModel
from ileap.pydantic_models.enums import (
    AirShippingOption,
    Certification,
    EnergyCarrierType,
    EnergyConsumptionUnit,
    FeedstockType,
    FlightLength,
    HocCo2eIntensityThroughput,
    HubType,
    Incoterms,
    PackagingOrTrEqType,
    TadTempControl,
    TemperatureControl,
    TocCo2eIntensityThroughput,
    TransportMode,
    TruckLoadingSequence,
)
from ileap.pydantic_models.scalars import (
    GlecDataQualityIndex,
    IataCode,
    ISO3166CC,
    Locode,
    NonEmptyList,
    PositiveDecimal,
    UicCode,
    UniqueList,
    WrappedDecimal,
)


# Distances
class ActualDistance(IleapBaseModel):
    """Distance measured on the actual route."""

    actual: WrappedDecimal
    gcd: WrappedDecimal | None = None
    sfd: WrappedDecimal | None = None

    def get_distance(self) -> Decimal:
        return self.actual.root


class GcdDistance(IleapBaseModel):
    """Great circle distance."""

    actual: WrappedDecimal | None = None
    gcd: WrappedDecimal
    sfd: WrappedDecimal | None = None

    def get_distance(self) -> Decimal:
        return self.gcd.root


class SfdDistance(IleapBaseModel):
    """Shortest feasible distance."""

    actual: WrappedDecimal | None = None
    gcd: WrappedDecimal | None = None
    sfd: WrappedDecimal

    def get_distance(self) -> Decimal:
        return self.sfd.root


# Tried in order: the first variant whose basis is present wins.
GlecDistance = Annotated[
    Union[ActualDistance, GcdDistance, SfdDistance],
    Field(union_mode="left_to_right"),
]


class Location(IleapBaseModel):
    street: str | None = None
    zip: str | None = None
    city: str
    country: ISO3166CC
    iata: IataCode | None = None
    locode: Locode | None = None
    uic: UicCode | None = None
    lat: WrappedDecimal | None = None
    lng: WrappedDecimal | None = None


# Energy
class Feedstock(IleapBaseModel):
    feedstock: FeedstockType
    feedstock_share: WrappedDecimal | None = Field(
        None, description="Fraction of the energy carrier, between 0 and 1"
    )
    region_provenance: str | None = None

    @model_validator(mode="after")
    def check_share_range(self) -> "Feedstock":
        if self.feedstock_share is not None and not (
            0 <= self.feedstock_share.root <= 1
        ):
            raise ValueError("feedstockShare must be between 0 and 1")
        return self


class EnergyCarrier(IleapBaseModel):
    energy_carrier: EnergyCarrierType
    feedstocks: list[Feedstock] | None = None
    energy_consumption: WrappedDecimal | None = None
    energy_consumption_unit: EnergyConsumptionUnit | None = None
    emission_factor_wtw: WrappedDecimal = Field(..., alias="emissionFactorWTW")
    emission_factor_ttw: WrappedDecimal = Field(..., alias="emissionFactorTTW")
    relative_share: WrappedDecimal

    @model_validator(mode="after")
    def check_feedstock_shares(self) -> "EnergyCarrier":
        total = sum(
            (
                feedstock.feedstock_share.root
                for feedstock in self.feedstocks or []
                if feedstock.feedstock_share is not None
            ),
            Decimal(0),
        )
        if total > 1:
            raise ValueError(f"feedstock shares add up to {total}, more than 1")
        return self


# Operation categories
class Toc(IleapBaseModel):
    """Transport Operation Category."""

    toc_id: str
    certifications: NonEmptyList[Certification] | None = None
    description: str | None = None
    mode: TransportMode
    load_factor: str | None = None
    empty_distance_factor: str | None = None
    temperature_control: TemperatureControl | None = None
    truck_loading_sequence: TruckLoadingSequence | None = None
    air_shipping_option: AirShippingOption | None = None
    flight_length: FlightLength | None = None
    glec_data_quality_index: GlecDataQualityIndex | None = None
    energy_carriers: NonEmptyList[EnergyCarrier]
    co2e_intensity_wtw: WrappedDecimal = Field(..., alias="co2eIntensityWTW")
    co2e_intensity_ttw: WrappedDecimal = Field(..., alias="co2eIntensityTTW")
    co2e_intensity_throughput: TocCo2eIntensityThroughput = Field(
        ..., alias="co2eIntensityThroughput"
    )


class Hoc(IleapBaseModel):
    """Hub Operation Category."""

    hoc_id: str
    description: str | None = None
    certifications: NonEmptyList[Certification] | None = None
    hub_type: HubType
    temperature_control: TemperatureControl | None = None
    hub_location: Location | None = None
    inbound_transport_mode: TransportMode | None = None
    outbound_transport_mode: TransportMode | None = None
    packaging_or_tr_eq_type: PackagingOrTrEqType | None = None
    packaging_or_tr_eq_amount: StrictInt | None = Field(None, ge=0)
    energy_carriers: NonEmptyList[EnergyCarrier]
    co2e_intensity_wtw: WrappedDecimal = Field(..., alias="co2eIntensityWTW")
    co2e_intensity_ttw: WrappedDecimal = Field(..., alias="co2eIntensityTTW")
    co2e_intensity_throughput: HocCo2eIntensityThroughput = Field(
        ..., alias="co2eIntensityThroughput"
    )


# Shipments
class Tce(IleapBaseModel):
    """
    Transport Chain Element: one leg of a shipment.

    A leg is driven either by a TOC (it moves cargo) or by a HOC (cargo is
    handled at a hub), never both. ``mass`` is in kilograms and
    ``transportActivity`` in tonne-kilometres.
    """

    tce_id: str
    prev_tce_ids: list[str] | None = None
    toc_id: str | None = None
    hoc_id: str | None = None
    shipment_id: str
    consignment_id: str | None = None
    mass: WrappedDecimal
    packaging_or_tr_eq_type: PackagingOrTrEqType | None = None
    packaging_or_tr_eq_amount: PositiveDecimal | None = None
    distance: GlecDistance
    origin: Location | None = None
    destination: Location | None = None
    transport_activity: WrappedDecimal
    departure_at: datetime | None = None
    arrival_at: datetime | None = None
    flight_no: str | None = None
    voyage_no: str | None = None
    incoterms: Incoterms | None = None
    co2e_wtw: WrappedDecimal = Field(..., alias="co2eWTW")
    co2e_ttw: WrappedDecimal = Field(..., alias="co2eTTW")
    nox_ttw: WrappedDecimal | None = Field(None, alias="noxTTW")
    sox_ttw: WrappedDecimal | None = Field(None, alias="soxTTW")
    ch4_ttw: WrappedDecimal | None = Field(None, alias="ch4TTW")
    pm_ttw: WrappedDecimal | None = Field(None, alias="pmTTW")

    @model_validator(mode="after")
    def check_operation_category(self) -> "Tce":
        if (self.toc_id is None) == (self.hoc_id is None):
            raise ValueError(f"TCE {self.tce_id} must set exactly one of tocId and hocId")
        return self


class ShipmentFootprint(IleapBaseModel):
    mass: str
    volume: str | None = None
    number_of_items: str | None = None
    type_of_items: str | None = None
    shipment_id: str
    tces: NonEmptyList[Tce]

    @model_validator(mode="after")
    def check_tce_shipment_ids(self) -> "ShipmentFootprint":
        for tce in self.tces:
            if tce.shipment_id != self.shipment_id:
                raise ValueError(
                    f"TCE {tce.tce_id} belongs to shipment {tce.shipment_id}, "
                    f"not {self.shipment_id}"
                )
        return self


# Transport activity data
class Tad(IleapBaseModel):
    """Transport Activity Data: raw activity behind emission calculations."""

    activity_id: str
    consignment_ids: UniqueList[str]
    distance: GlecDistance
    mass: WrappedDecimal | None = None
    load_factor: WrappedDecimal | None = None
    empty_distance_factor: WrappedDecimal | None = None
    origin: Location
    destination: Location
    departure_at: datetime
    arrival_at: datetime
    mode: TransportMode
    packaging_or_tr_eq_type: PackagingOrTrEqType | None = None
    packaging_or_tr_eq_amount: StrictInt | None = Field(None, ge=0)
    energy_carriers: NonEmptyList[EnergyCarrier] | None = None
    temperature_control: TadTempControl | None = None


# Payloads a product footprint can carry, tried in this order.
ILeapType = Annotated[
    Union[ShipmentFootprint, Toc, Hoc],
    Field(union_mode="left_to_right"),
]
