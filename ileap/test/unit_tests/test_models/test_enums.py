"""
Tests for the wire strings of the enumerated vocabularies.
"""
import pytest

from ileap.pydantic_models.enums import (
    AirShippingOption,
    Certification,
    CharacterizationFactors,
    CrossSectoralStandard,
    DeclaredUnit,
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
    UNRegionOrSubregion,
)
from ileap.test.factory.logistics import TocFactory


@pytest.mark.parametrize(
    "member, wire",
    [
        (TransportMode.INLAND_WATERWAY, "InlandWaterway"),
        (PackagingOrTrEqType.CONTAINER_TEU, "Container-TEU"),
        (EnergyCarrierType.AVIATION_FUEL, "Aviation fuel"),
        (EnergyConsumptionUnit.KWH, "kWh"),
        (FeedstockType.RENEWABLE_ELECTRICITY, "Renewable electricity"),
        (TemperatureControl.MIXED, "mixed"),
        (TadTempControl.REFRIGERATED, "refrigerated"),
        (AirShippingOption.BELLY_FREIGHT, "belly freight"),
        (FlightLength.SHORT_HAUL, "short-haul"),
        (HubType.MARITIME_CONTAINER_TERMINAL, "MaritimeContainerTerminal"),
        (Incoterms.DPU, "DPU"),
        (Certification.ISO14083_2023, "ISO14083:2023"),
        (Certification.GLEC_V3_1, "GLECv3.1"),
        (TocCo2eIntensityThroughput.TEU_KM, "TEUkm"),
        (TocCo2eIntensityThroughput.TKM, "tkm"),
        (HocCo2eIntensityThroughput.TONNES, "tonnes"),
        (DeclaredUnit.TON_KILOMETER, "ton kilometer"),
        (CrossSectoralStandard.ISO14040_44, "ISO14040-44"),
        (CharacterizationFactors.AR5, "AR5"),
        (UNRegionOrSubregion.SOUTH_EASTERN_ASIA, "South-eastern Asia"),
    ],
)
def test_wire_strings(member, wire):
    assert member.value == wire
    assert type(member)(wire) is member


def test_enums_round_trip_through_records():
    toc = TocFactory(
        mode=TransportMode.AIR,
        air_shipping_option=AirShippingOption.FREIGHTER,
        flight_length=FlightLength.LONG_HAUL,
        certifications=[Certification.GLEC_V3],
        co2e_intensity_throughput=TocCo2eIntensityThroughput.TEU_KM,
    )

    wire = toc.model_dump(mode="json")

    assert wire["mode"] == "Air"
    assert wire["airShippingOption"] == "freighter"
    assert wire["flightLength"] == "long-haul"
    assert wire["certifications"] == ["GLECv3"]
    assert wire["co2eIntensityThroughput"] == "TEUkm"
    assert type(toc).model_validate(wire) == toc
