"""
Mapping of iLEAP records onto PACT product footprints.

A ShipmentFootprint, TOC or HOC is wrapped into a ProductFootprint whose
CarbonFootprint is derived from the record and whose single
DataModelExtension carries the record unchanged.
"""

import logging
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from ileap.pydantic_models.enums import (
    CharacterizationFactors,
    CrossSectoralStandard,
    DeclaredUnit,
    HocCo2eIntensityThroughput,
    PfStatus,
)
from ileap.pydantic_models.logistics import Hoc, ILeapType, ShipmentFootprint, Toc
from ileap.pydantic_models.pact import (
    CarbonFootprint,
    DataModelExtension,
    ProductFootprint,
)
from ileap.pydantic_models.scalars import IpccCharacterizationFactorsSource
from ileap.services.exceptions import UnsupportedThroughputUnitError
from ileap.utils.constants import (
    HOC_DECLARED_AMOUNT_KG,
    TOC_DECLARED_AMOUNT_TKM,
    IleapExtension,
    PactDefaults,
)

logger = logging.getLogger(__name__)


class PactMappedFields(BaseModel):
    """Record-specific values needed to build a product footprint."""

    model_config = ConfigDict(frozen=True)

    product_id_type: str
    data_schema_id: str
    id: str
    product_name_company: str
    declared_unit: DeclaredUnit
    unitary_product_amount: Decimal
    p_cf_excluding_biogenic: Decimal


def map_shipment(shipment: ShipmentFootprint) -> PactMappedFields:
    """
    Derive footprint values for a shipment.

    The declared amount is the total transport activity of all legs and the
    emissions are the sum of their well-to-wheel emissions.
    """
    return PactMappedFields(
        product_id_type="shipment",
        data_schema_id="shipment-footprint",
        id=shipment.shipment_id,
        product_name_company=f"ShipmentFootprint with id {shipment.shipment_id}",
        declared_unit=DeclaredUnit.TON_KILOMETER,
        unitary_product_amount=sum(
            (tce.transport_activity.root for tce in shipment.tces), Decimal(0)
        ),
        p_cf_excluding_biogenic=sum(
            (tce.co2e_wtw.root for tce in shipment.tces), Decimal(0)
        ),
    )


def map_toc(toc: Toc) -> PactMappedFields:
    return PactMappedFields(
        product_id_type="toc",
        data_schema_id="toc",
        id=toc.toc_id,
        product_name_company=f"TOC with ID {toc.toc_id}",
        declared_unit=DeclaredUnit.TON_KILOMETER,
        unitary_product_amount=TOC_DECLARED_AMOUNT_TKM,
        p_cf_excluding_biogenic=toc.co2e_intensity_wtw.root,
    )


def map_hoc(hoc: Hoc) -> PactMappedFields:
    """
    Derive footprint values for a hub operation category.

    Raises:
        UnsupportedThroughputUnitError: If the HOC intensity is per TEU
    """
    if hoc.co2e_intensity_throughput != HocCo2eIntensityThroughput.TONNES:
        logger.error(
            f"Cannot map HOC {hoc.hoc_id}: throughput "
            f"{hoc.co2e_intensity_throughput.value} has no mass conversion"
        )
        raise UnsupportedThroughputUnitError(
            hoc.hoc_id, hoc.co2e_intensity_throughput.value
        )
    return PactMappedFields(
        product_id_type="hoc",
        data_schema_id="hoc",
        id=hoc.hoc_id,
        product_name_company=f"HOC with ID {hoc.hoc_id}",
        declared_unit=DeclaredUnit.KILOGRAM,
        unitary_product_amount=HOC_DECLARED_AMOUNT_KG,
        p_cf_excluding_biogenic=hoc.co2e_intensity_wtw.root,
    )


def pact_mapped_fields(ileap_type: ILeapType) -> PactMappedFields:
    """Dispatch to the mapping for the record's type."""
    if isinstance(ileap_type, ShipmentFootprint):
        return map_shipment(ileap_type)
    if isinstance(ileap_type, Toc):
        return map_toc(ileap_type)
    if isinstance(ileap_type, Hoc):
        return map_hoc(ileap_type)
    raise TypeError(f"Cannot map {type(ileap_type).__name__} to a product footprint")


def to_char_factors(
    characterization_factors: Iterable[CharacterizationFactors] | None,
) -> tuple[CharacterizationFactors, list[IpccCharacterizationFactorsSource]]:
    """
    Resolve the headline characterization factor and its sources.

    Args:
        characterization_factors: IPCC assessment reports used, if known

    Returns:
        Tuple of the headline factor (AR5 whenever AR5 was used) and the
        de-duplicated list of sources in input order. Without input, AR5.

    Example:
        >>> to_char_factors([CharacterizationFactors.AR6])[0]
        <CharacterizationFactors.AR6: 'AR6'>
    """
    factors = [CharacterizationFactors(f) for f in characterization_factors or []]
    if not factors:
        return CharacterizationFactors.AR5, [
            IpccCharacterizationFactorsSource(CharacterizationFactors.AR5.value)
        ]

    sources: list[IpccCharacterizationFactorsSource] = []
    for factor in factors:
        source = IpccCharacterizationFactorsSource(factor.value)
        if source not in sources:
            sources.append(source)

    if CharacterizationFactors.AR5 in factors:
        return CharacterizationFactors.AR5, sources
    return CharacterizationFactors.AR6, sources


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PcfMapper:
    """
    Builds PACT product footprints from iLEAP records.

    The clock and the identifier factory are injectable so that tests can
    produce deterministic footprints.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], uuid.UUID] | None = None,
    ):
        """
        Initialize the mapper.

        Args:
            clock: Returns the current time, defaults to UTC now
            id_factory: Returns fresh footprint ids, defaults to uuid4
        """
        self.clock = clock or utc_now
        self.id_factory = id_factory or uuid.uuid4

    def to_pcf(
        self,
        ileap_type: ILeapType,
        company_name: str,
        company_urn: str,
        characterization_factors: Iterable[CharacterizationFactors] | None = None,
    ) -> ProductFootprint[ILeapType]:
        """
        Wrap an iLEAP record into a product footprint.

        Args:
            ileap_type: ShipmentFootprint, Toc or Hoc to wrap
            company_name: Name of the company responsible for the product
            company_urn: URN identifying that company
            characterization_factors: IPCC characterization factors used to
                compute the record's emissions; AR5 when omitted

        Returns:
            ProductFootprint carrying the record as its only extension

        Raises:
            UnsupportedThroughputUnitError: If a HOC declares TEU throughput
            pydantic.ValidationError: If the company name or URN is invalid
        """
        fields = pact_mapped_fields(ileap_type)
        factor, sources = to_char_factors(characterization_factors)
        now = self.clock()

        logger.info(
            f"Mapping {fields.product_id_type} {fields.id} to a product footprint"
        )

        pcf = CarbonFootprint(
            declared_unit=fields.declared_unit,
            unitary_product_amount=fields.unitary_product_amount,
            p_cf_excluding_biogenic=fields.p_cf_excluding_biogenic,
            fossil_ghg_emissions=fields.p_cf_excluding_biogenic,
            fossil_carbon_content=Decimal(0),
            biogenic_carbon_content=Decimal(0),
            characterization_factors=factor,
            ipcc_characterization_factors_sources=sources,
            cross_sectoral_standards_used=[CrossSectoralStandard.ISO14083],
            boundary_processes_description="",
            reference_period_start=now,
            reference_period_end=now + PactDefaults.REFERENCE_PERIOD,
            exempted_emissions_percent=0.0,
            exempted_emissions_description="",
            packaging_emissions_included=False,
        )

        extension = DataModelExtension[ILeapType](
            spec_version=IleapExtension.SPEC_VERSION,
            data_schema=IleapExtension.DATA_SCHEMA_URL.format(
                schema_id=fields.data_schema_id
            ),
            documentation=IleapExtension.DOCUMENTATION_URL,
            data=ileap_type,
        )

        return ProductFootprint[ILeapType](
            id=self.id_factory(),
            spec_version=PactDefaults.SPEC_VERSION,
            version=PactDefaults.VERSION,
            created=now,
            status=PfStatus.ACTIVE,
            company_name=company_name,
            company_ids=[company_urn],
            product_description="",
            product_ids=[
                f"{PactDefaults.PRODUCT_ID_URN_PREFIX}:"
                f"{fields.product_id_type}:{fields.id}"
            ],
            product_category_cpc=PactDefaults.PRODUCT_CATEGORY_CPC,
            product_name_company=fields.product_name_company,
            comment="",
            pcf=pcf,
            extensions=[extension],
        )


def to_pcf(
    ileap_type: ILeapType,
    company_name: str,
    company_urn: str,
    characterization_factors: Iterable[CharacterizationFactors] | None = None,
) -> ProductFootprint[ILeapType]:
    """Wrap an iLEAP record into a product footprint stamped with the current time."""
    return PcfMapper().to_pcf(
        ileap_type, company_name, company_urn, characterization_factors
    )
