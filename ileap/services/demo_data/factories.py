"""
Random factories for iLEAP demo records.

All randomness goes through ``factory.random.randgen`` so that
``factory.random.reseed_random`` makes a run reproducible.
"""
import string
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import factory
import factory.fuzzy
import factory.random

from ileap.pydantic_models.enums import (
    AirShippingOption,
    Certification,
    EnergyCarrierType,
    EnergyConsumptionUnit,
    FeedstockType,
    FlightLength,
    HocCo2eIntensityThroughput,
    HubType,
    PackagingOrTrEqType,
    TadTempControl,
    TemperatureControl,
    TocCo2eIntensityThroughput,
    TransportMode,
    TruckLoadingSequence,
)
from ileap.pydantic_models.logistics import (
    ActualDistance,
    EnergyCarrier,
    Feedstock,
    GcdDistance,
    Hoc,
    Location,
    SfdDistance,
    Tad,
    Toc,
)

ID_CHARS = string.ascii_lowercase + string.digits

# (city, country, locode)
SITES = [
    ("Hamburg", "DE", "DEHAM"),
    ("Duisburg", "DE", "DEDUI"),
    ("Rotterdam", "NL", "NLRTM"),
    ("Antwerp", "BE", "BEANR"),
    ("Le Havre", "FR", "FRLEH"),
    ("Basel", "CH", "CHBSL"),
    ("Milano", "IT", "ITMIL"),
    ("Gdansk", "PL", "PLGDN"),
]

FOSSIL_FEEDSTOCKS = [
    FeedstockType.FOSSIL,
    FeedstockType.NATURAL_GAS,
    FeedstockType.COOKING_OIL,
]

# Feedstocks an energy carrier can plausibly be produced from
COMPATIBLE_FEEDSTOCKS = {
    EnergyCarrierType.DIESEL: [FeedstockType.FOSSIL],
    EnergyCarrierType.HYDROGEN: [FeedstockType.COOKING_OIL],
    EnergyCarrierType.ELECTRIC: [
        FeedstockType.GRID,
        FeedstockType.RENEWABLE_ELECTRICITY,
    ],
}

AVERAGE_SPEED_KMH = Decimal(100)


def rng():
    return factory.random.randgen


def random_id(prefix: str) -> str:
    return prefix + "".join(rng().choice(ID_CHARS) for _ in range(8))


def random_decimal(low: int, high: int, places: int = 2) -> Decimal:
    """Uniform decimal in [low, high] with ``places`` fractional digits."""
    scale = 10**places
    return Decimal(rng().randint(low * scale, high * scale)).scaleb(-places)


def split_shares(count: int) -> list[Decimal]:
    """Random shares with one decimal place that add up to exactly 1."""
    if count == 1:
        return [Decimal(1)]
    first = Decimal(rng().randint(1, 9)).scaleb(-1)
    return [first, Decimal(1) - first]


def random_distance(low: int = 1, high: int = 32767):
    """GLEC distance with a randomly chosen basis."""
    value = Decimal(rng().randint(low, high))
    variant = rng().choice([ActualDistance, GcdDistance, SfdDistance])
    if variant is ActualDistance:
        return ActualDistance(actual=value)
    if variant is GcdDistance:
        return GcdDistance(gcd=value)
    return SfdDistance(sfd=value)


def travel_time(distance: Decimal) -> timedelta:
    return timedelta(hours=int((distance / AVERAGE_SPEED_KMH).to_integral_value()))


def random_feedstocks(energy_carrier: EnergyCarrierType) -> list[Feedstock] | None:
    if rng().random() < 0.3:
        return None
    candidates = COMPATIBLE_FEEDSTOCKS.get(energy_carrier, FOSSIL_FEEDSTOCKS)
    chosen = rng().sample(candidates, rng().randint(1, len(candidates)))
    return [
        Feedstock(feedstock=feedstock, feedstock_share=share)
        for feedstock, share in zip(chosen, split_shares(len(chosen)))
    ]


def random_energy_carriers(max_count: int = 2) -> list[EnergyCarrier]:
    shares = split_shares(rng().randint(1, max_count))
    return [EnergyCarrierFactory(relative_share=share) for share in shares]


class EnergyCarrierFactory(factory.Factory):
    class Meta:
        model = EnergyCarrier

    energy_carrier = factory.fuzzy.FuzzyChoice(EnergyCarrierType)
    feedstocks = factory.LazyAttribute(lambda o: random_feedstocks(o.energy_carrier))
    energy_consumption_unit = factory.fuzzy.FuzzyChoice(EnergyConsumptionUnit)
    emission_factor_wtw = factory.LazyFunction(lambda: random_decimal(50, 100))
    emission_factor_ttw = factory.LazyFunction(lambda: random_decimal(0, 50))
    relative_share = Decimal(1)


class LocationFactory(factory.Factory):
    class Meta:
        model = Location

    class Params:
        site = factory.fuzzy.FuzzyChoice(SITES)

    city = factory.LazyAttribute(lambda o: o.site[0])
    country = factory.LazyAttribute(lambda o: o.site[1])
    locode = factory.LazyAttribute(lambda o: o.site[2])


def _air_only(value_factory):
    return factory.LazyAttribute(
        lambda o: value_factory() if o.mode == TransportMode.AIR else None
    )


class TocFactory(factory.Factory):
    class Meta:
        model = Toc

    toc_id = factory.LazyFunction(lambda: random_id("toc-"))
    certifications = factory.LazyFunction(lambda: [rng().choice(list(Certification))])
    mode = factory.fuzzy.FuzzyChoice(TransportMode)
    load_factor = factory.LazyFunction(lambda: str(random_decimal(0, 1, places=1)))
    empty_distance_factor = factory.LazyFunction(
        lambda: str(random_decimal(0, 1, places=1))
    )
    temperature_control = factory.fuzzy.FuzzyChoice(TemperatureControl)
    truck_loading_sequence = factory.LazyAttribute(
        lambda o: rng().choice(list(TruckLoadingSequence))
        if o.mode == TransportMode.ROAD
        else None
    )
    air_shipping_option = _air_only(lambda: rng().choice(list(AirShippingOption)))
    flight_length = _air_only(lambda: rng().choice(list(FlightLength)))
    glec_data_quality_index = factory.fuzzy.FuzzyInteger(0, 4)
    energy_carriers = factory.LazyFunction(random_energy_carriers)
    # kg CO2e per tkm
    co2e_intensity_wtw = factory.LazyFunction(lambda: random_decimal(0, 1, places=3))
    co2e_intensity_ttw = factory.LazyAttribute(
        lambda o: (o.co2e_intensity_wtw * Decimal("0.8")).quantize(Decimal("0.001"))
    )
    co2e_intensity_throughput = TocCo2eIntensityThroughput.TKM


def _hub_transport_modes(hub_type: HubType) -> tuple[TransportMode, TransportMode]:
    modes = list(TransportMode)
    if hub_type == HubType.WAREHOUSE:
        return TransportMode.ROAD, TransportMode.ROAD
    if hub_type == HubType.MARITIME_CONTAINER_TERMINAL:
        return TransportMode.SEA, rng().choice(modes)
    inbound, outbound = rng().sample(modes, 2)
    return inbound, outbound


class HocFactory(factory.Factory):
    class Meta:
        model = Hoc

    class Params:
        transport_modes = factory.LazyAttribute(
            lambda o: _hub_transport_modes(o.hub_type)
        )

    hoc_id = factory.LazyFunction(lambda: random_id("hoc-"))
    certifications = factory.LazyFunction(lambda: [rng().choice(list(Certification))])
    hub_type = factory.fuzzy.FuzzyChoice(HubType)
    temperature_control = factory.fuzzy.FuzzyChoice(TemperatureControl)
    hub_location = factory.SubFactory(LocationFactory)
    inbound_transport_mode = factory.LazyAttribute(lambda o: o.transport_modes[0])
    outbound_transport_mode = factory.LazyAttribute(lambda o: o.transport_modes[1])
    packaging_or_tr_eq_type = factory.fuzzy.FuzzyChoice(
        [
            PackagingOrTrEqType.BOX,
            PackagingOrTrEqType.PALLET,
            PackagingOrTrEqType.CONTAINER,
        ]
    )
    energy_carriers = factory.LazyFunction(random_energy_carriers)
    # kg CO2e per tonne handled
    co2e_intensity_wtw = factory.LazyFunction(lambda: random_decimal(0, 10))
    co2e_intensity_ttw = factory.LazyAttribute(
        lambda o: (o.co2e_intensity_wtw * Decimal("0.3")).quantize(Decimal("0.01"))
    )
    co2e_intensity_throughput = HocCo2eIntensityThroughput.TONNES


class TadFactory(factory.Factory):
    class Meta:
        model = Tad

    activity_id = factory.Sequence(lambda n: str(n + 1))
    consignment_ids = factory.LazyFunction(
        lambda: [random_id("consignment-") for _ in range(rng().randint(1, 3))]
    )
    distance = factory.LazyFunction(lambda: random_distance(high=2000))
    mass = factory.LazyFunction(lambda: Decimal(rng().randint(100, 40000)))
    load_factor = factory.LazyFunction(lambda: random_decimal(0, 1, places=1))
    empty_distance_factor = factory.LazyFunction(lambda: random_decimal(0, 1, places=1))
    origin = factory.SubFactory(LocationFactory)
    destination = factory.SubFactory(LocationFactory)
    departure_at = factory.LazyFunction(
        lambda: datetime.now(timezone.utc).replace(microsecond=0)
        + timedelta(days=rng().randint(0, 255))
    )
    arrival_at = factory.LazyAttribute(
        lambda o: o.departure_at + travel_time(o.distance.get_distance())
    )
    mode = factory.fuzzy.FuzzyChoice(TransportMode)
    packaging_or_tr_eq_type = factory.fuzzy.FuzzyChoice(PackagingOrTrEqType)
    packaging_or_tr_eq_amount = factory.fuzzy.FuzzyInteger(1, 50)
    energy_carriers = factory.LazyFunction(random_energy_carriers)
    temperature_control = factory.fuzzy.FuzzyChoice(TadTempControl)


