"""
Random demo data for the iLEAP demo API.

Shipments are chains of TCEs, each driven by a freshly generated TOC or HOC.
Every shipment, TOC and HOC is returned wrapped in a product footprint.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal

import factory.random

from ileap.pydantic_models.enums import CharacterizationFactors, Incoterms
from ileap.pydantic_models.logistics import (
    ActualDistance,
    Hoc,
    ILeapType,
    ShipmentFootprint,
    Tad,
    Tce,
    Toc,
)
from ileap.pydantic_models.pact import ProductFootprint
from ileap.services.demo_data.factories import (
    HocFactory,
    TadFactory,
    TocFactory,
    random_distance,
    random_id,
    rng,
    travel_time,
)
from ileap.services.mapping.pcf_mapper import PcfMapper
from ileap.utils.constants import KG_TO_TONNES, DemoCompany

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
LEG_TOC = "toc"
LEG_HOC = "hoc"


def plan_leg_kinds(count: int) -> list[str]:
    """
    Decide which legs of a shipment are handled at a hub.

    A hub leg is never the first or the last leg of a shipment and never
    directly follows another hub leg.

    Args:
        count: Number of legs in the shipment

    Returns:
        List of LEG_TOC / LEG_HOC markers, one per leg
    """
    kinds: list[str] = []
    for index in range(count):
        hub_allowed = 0 < index < count - 1 and kinds[-1] != LEG_HOC
        kinds.append(LEG_HOC if hub_allowed and rng().random() < 0.5 else LEG_TOC)
    return kinds


class DemoDataGenerator:
    """
    Generates random shipments together with their TOCs and HOCs.

    Transport legs carry ``mass / 1000 * distance`` tonne-kilometres and emit
    the TOC intensity times that activity. Hub legs carry no transport
    activity and emit the HOC intensity times the handled tonnes.
    """

    def __init__(
        self,
        mapper: PcfMapper | None = None,
        company_name: str = DemoCompany.NAME,
        company_urn: str = DemoCompany.URN,
    ):
        self.mapper = mapper or PcfMapper()
        self.company_name = company_name
        self.company_urn = company_urn

    def generate(self, size: int) -> list[ProductFootprint[ILeapType]]:
        """
        Generate between 1 and ``size`` shipments of 1 to ``size`` legs.

        Returns:
            Shipment footprints, then TOC footprints, then HOC footprints
        """
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")

        shipments: list[ShipmentFootprint] = []
        tocs: list[Toc] = []
        hocs: list[Hoc] = []
        for _ in range(rng().randint(1, size)):
            shipment, shipment_tocs, shipment_hocs = self.build_shipment(size)
            shipments.append(shipment)
            tocs.extend(shipment_tocs)
            hocs.extend(shipment_hocs)

        logger.info(
            f"Generated {len(shipments)} shipments, {len(tocs)} TOCs and {len(hocs)} HOCs"
        )
        return [self.wrap(record) for record in [*shipments, *tocs, *hocs]]

    def wrap(self, record: ILeapType) -> ProductFootprint[ILeapType]:
        return self.mapper.to_pcf(
            record,
            self.company_name,
            self.company_urn,
            [CharacterizationFactors.AR6],
        )

    def build_shipment(
        self, max_legs: int
    ) -> tuple[ShipmentFootprint, list[Toc], list[Hoc]]:
        shipment_id = random_id("shipment-")
        mass = Decimal(rng().randint(1000, 40000))
        incoterms = rng().choice(list(Incoterms))
        departure_at = self.mapper.clock().replace(microsecond=0) + timedelta(
            days=rng().randint(0, 255)
        )

        tces: list[Tce] = []
        tocs: list[Toc] = []
        hocs: list[Hoc] = []
        for kind in plan_leg_kinds(rng().randint(1, max_legs)):
            prev_tce_ids = [tce.tce_id for tce in tces] or None
            if kind == LEG_HOC:
                hoc = HocFactory()
                hocs.append(hoc)
                tce = self.hub_leg(hoc, shipment_id, mass, prev_tce_ids, departure_at)
            else:
                toc = TocFactory()
                tocs.append(toc)
                tce = self.transport_leg(
                    toc, shipment_id, mass, prev_tce_ids, departure_at, incoterms
                )
            tces.append(tce)
            departure_at = tce.arrival_at

        shipment = ShipmentFootprint(mass=str(mass), shipment_id=shipment_id, tces=tces)
        return shipment, tocs, hocs

    def transport_leg(
        self,
        toc: Toc,
        shipment_id: str,
        mass: Decimal,
        prev_tce_ids: list[str] | None,
        departure_at: datetime,
        incoterms: Incoterms,
    ) -> Tce:
        distance = random_distance()
        transport_activity = (
            mass * KG_TO_TONNES * distance.get_distance()
        ).quantize(TWO_PLACES)
        return Tce(
            tce_id=random_id("tce-"),
            prev_tce_ids=prev_tce_ids,
            toc_id=toc.toc_id,
            shipment_id=shipment_id,
            consignment_id=random_id("consignment-"),
            mass=mass,
            distance=distance,
            transport_activity=transport_activity,
            departure_at=departure_at,
            arrival_at=departure_at + travel_time(distance.get_distance()),
            incoterms=incoterms,
            co2e_wtw=(toc.co2e_intensity_wtw.root * transport_activity).quantize(
                TWO_PLACES
            ),
            co2e_ttw=(toc.co2e_intensity_ttw.root * transport_activity).quantize(
                TWO_PLACES
            ),
        )

    def hub_leg(
        self,
        hoc: Hoc,
        shipment_id: str,
        mass: Decimal,
        prev_tce_ids: list[str] | None,
        departure_at: datetime,
    ) -> Tce:
        tonnes = mass * KG_TO_TONNES
        return Tce(
            tce_id=random_id("tce-"),
            prev_tce_ids=prev_tce_ids,
            hoc_id=hoc.hoc_id,
            shipment_id=shipment_id,
            consignment_id=random_id("consignment-"),
            mass=mass,
            distance=ActualDistance(actual=Decimal(0)),
            transport_activity=Decimal(0),
            departure_at=departure_at,
            arrival_at=departure_at + timedelta(hours=rng().randint(1, 24)),
            co2e_wtw=(hoc.co2e_intensity_wtw.root * tonnes).quantize(TWO_PLACES),
            co2e_ttw=(hoc.co2e_intensity_ttw.root * tonnes).quantize(TWO_PLACES),
        )


def gen_rnd_demo_data(
    size: int,
    seed: int | None = None,
    mapper: PcfMapper | None = None,
    company_name: str = DemoCompany.NAME,
    company_urn: str = DemoCompany.URN,
) -> list[ProductFootprint[ILeapType]]:
    """
    Generate random iLEAP product footprints.

    Args:
        size: Upper bound for the number of shipments and legs per shipment
        seed: Makes the records reproducible; footprint ids and timestamps
            still vary
        mapper: Mapper used to wrap the records, e.g. with a fixed clock
        company_name: Company the footprints are issued by
        company_urn: URN of that company

    Returns:
        Shipment footprints, then TOC footprints, then HOC footprints
    """
    if seed is not None:
        factory.random.reseed_random(seed)
    generator = DemoDataGenerator(
        mapper=mapper, company_name=company_name, company_urn=company_urn
    )
    return generator.generate(size)


def gen_rnd_tad_data(size: int, seed: int | None = None) -> list[Tad]:
    """
    Generate ``size`` random transport activity data records.

    Activity ids run from "1" to ``str(size)``.
    """
    if seed is not None:
        factory.random.reseed_random(seed)
    tads = [TadFactory(activity_id=str(index + 1)) for index in range(size)]
    logger.info(f"Generated {len(tads)} TADs")
    return tads
