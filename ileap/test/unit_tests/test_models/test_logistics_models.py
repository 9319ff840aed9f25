"""
Tests for the iLEAP logistics records.
"""
import json
from decimal import Decimal

import pytest
from pydantic import TypeAdapter, ValidationError

from ileap.pydantic_models.logistics import (
    ActualDistance,
    EnergyCarrier,
    GcdDistance,
    GlecDistance,
    Hoc,
    ILeapType,
    SfdDistance,
    ShipmentFootprint,
    Tad,
    Tce,
    Toc,
)
from ileap.test.factory.logistics import (
    EnergyCarrierFactory,
    FeedstockFactory,
    HocFactory,
    ShipmentFootprintFactory,
    TadFactory,
    TceFactory,
    TocFactory,
)


@pytest.mark.parametrize(
    "record_factory",
    [ShipmentFootprintFactory, TocFactory, HocFactory, TadFactory],
)
def test_round_trip(record_factory):
    record = record_factory()

    parsed = type(record).model_validate_json(record.model_dump_json())

    assert parsed == record


def test_wire_names_and_omitted_nulls():
    wire = ShipmentFootprintFactory().model_dump(mode="json")

    assert wire["shipmentId"] == "shipment-1"
    first, hub, last = wire["tces"]
    assert first["co2eWTW"] == "118.44"
    assert first["transportActivity"] == "16920"
    assert first["distance"] == {"actual": "423"}
    assert "hocId" not in first
    assert "prevTceIds" not in first
    assert hub["hocId"] == "hoc-1"
    assert "tocId" not in hub
    assert last["prevTceIds"] == ["tce-1", "tce-2"]
    assert "volume" not in wire


def test_toc_wire_names():
    wire = TocFactory().model_dump(mode="json")

    assert wire["co2eIntensityWTW"] == "0.007"
    assert wire["co2eIntensityTTW"] == "0.0056"
    assert wire["co2eIntensityThroughput"] == "tkm"
    assert wire["energyCarriers"][0]["emissionFactorWTW"] == "3.6801"
    assert wire["energyCarriers"][0]["feedstocks"] == [
        {"feedstock": "Fossil", "feedstockShare": "1"}
    ]


def test_records_are_frozen():
    toc = TocFactory()
    with pytest.raises(ValidationError):
        toc.toc_id = "other"


@pytest.mark.parametrize(
    "overrides",
    [
        {"hoc_id": "hoc-1"},
        {"toc_id": None},
    ],
)
def test_tce_needs_exactly_one_operation_category(overrides):
    with pytest.raises(ValidationError) as exc_info:
        TceFactory(**overrides)

    assert "exactly one of tocId and hocId" in str(exc_info.value)


def test_hub_tce():
    tce = TceFactory(hub=True)

    assert tce.toc_id is None
    assert tce.hoc_id == "hoc-1"
    assert tce.transport_activity.root == Decimal("0")


def test_tce_requires_mass_and_co2e():
    data = TceFactory().model_dump(mode="json")
    del data["co2eWTW"]

    with pytest.raises(ValidationError):
        Tce.model_validate(data)


def test_shipment_needs_tces():
    with pytest.raises(ValidationError):
        ShipmentFootprint(mass="1000", shipment_id="shipment-1", tces=[])


def test_shipment_rejects_foreign_tces():
    with pytest.raises(ValidationError) as exc_info:
        ShipmentFootprint(
            mass="40000",
            shipment_id="shipment-1",
            tces=[TceFactory(shipment_id="shipment-2")],
        )

    assert "belongs to shipment shipment-2" in str(exc_info.value)


def test_feedstock_share_is_a_fraction():
    with pytest.raises(ValidationError):
        FeedstockFactory(feedstock_share=Decimal("1.5"))


def test_feedstock_shares_add_up_to_at_most_one():
    feedstocks = [
        FeedstockFactory(feedstock_share=Decimal("0.6")),
        FeedstockFactory(feedstock_share=Decimal("0.6")),
    ]
    with pytest.raises(ValidationError) as exc_info:
        EnergyCarrierFactory(feedstocks=feedstocks)

    assert "more than 1" in str(exc_info.value)


def test_energy_carrier_requires_relative_share():
    data = EnergyCarrierFactory().model_dump(mode="json")
    del data["relativeShare"]

    with pytest.raises(ValidationError):
        EnergyCarrier.model_validate(data)


def test_energy_carrier_without_feedstocks():
    carrier = EnergyCarrierFactory(feedstocks=None)

    assert "feedstocks" not in carrier.model_dump(mode="json")


@pytest.mark.parametrize(
    "wire, expected, distance",
    [
        ({"actual": "12"}, ActualDistance, Decimal("12")),
        ({"gcd": "7"}, GcdDistance, Decimal("7")),
        ({"sfd": "9.5"}, SfdDistance, Decimal("9.5")),
        ({"actual": "12", "gcd": "7"}, ActualDistance, Decimal("12")),
        ({"gcd": "7", "sfd": "9"}, GcdDistance, Decimal("7")),
    ],
)
def test_glec_distance_variants(wire, expected, distance):
    parsed = TypeAdapter(GlecDistance).validate_python(wire)

    assert type(parsed) is expected
    assert parsed.get_distance() == distance
    assert parsed.model_dump(mode="json") == wire


def test_glec_distance_needs_a_basis():
    with pytest.raises(ValidationError):
        TypeAdapter(GlecDistance).validate_python({})


@pytest.mark.parametrize(
    "record_factory, expected",
    [
        (ShipmentFootprintFactory, ShipmentFootprint),
        (TocFactory, Toc),
        (HocFactory, Hoc),
    ],
)
def test_ileap_type_resolves_payload(record_factory, expected):
    wire = record_factory().model_dump(mode="json")

    parsed = TypeAdapter(ILeapType).validate_python(wire)

    assert type(parsed) is expected


def test_tad_consignment_ids_are_unique():
    with pytest.raises(ValidationError):
        TadFactory(consignment_ids=["c-1", "c-1"])


def test_tad_without_consignments():
    tad = TadFactory(consignment_ids=[])

    assert tad.model_dump(mode="json")["consignmentIds"] == []


def test_tad_from_wire():
    wire = TadFactory(activity_id="7").model_dump(mode="json")

    tad = Tad.model_validate(wire)

    assert tad.activity_id == "7"
    assert tad.destination.city == "Basel"
    assert tad.destination.country.root == "CH"


def test_hoc_packaging_amount_not_negative():
    with pytest.raises(ValidationError):
        HocFactory(packaging_or_tr_eq_amount=-1)


@pytest.mark.parametrize("model, factory", [(Hoc, HocFactory), (Tad, TadFactory)])
def test_packaging_amount_must_be_an_integer(model, factory):
    wire = factory().model_dump(mode="json")
    wire["packagingOrTrEqAmount"] = "12"

    with pytest.raises(ValidationError):
        model.model_validate_json(json.dumps(wire))
