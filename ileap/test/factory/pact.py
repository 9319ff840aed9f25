"""
Fixed-value factories for PACT envelope records.
"""
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import factory

from ileap.pydantic_models.enums import (
    CharacterizationFactors,
    CrossSectoralStandard,
    DeclaredUnit,
)
from ileap.pydantic_models.pact import CarbonFootprint
from ileap.services.mapping.pcf_mapper import PcfMapper

FIXED_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
FIXED_PF_ID = uuid.UUID("7ee5ae5c-7c1d-4f8e-b5a6-38b56fbc6a44")


def fixed_mapper() -> PcfMapper:
    return PcfMapper(clock=lambda: FIXED_NOW, id_factory=lambda: FIXED_PF_ID)


class CarbonFootprintFactory(factory.Factory):
    class Meta:
        model = CarbonFootprint

    declared_unit = DeclaredUnit.TON_KILOMETER
    unitary_product_amount = Decimal("33840")
    p_cf_excluding_biogenic = Decimal("3131.06")
    fossil_ghg_emissions = Decimal("3131.06")
    fossil_carbon_content = Decimal("0")
    biogenic_carbon_content = Decimal("0")
    characterization_factors = CharacterizationFactors.AR6
    ipcc_characterization_factors_sources = ["AR6"]
    cross_sectoral_standards_used = [CrossSectoralStandard.ISO14083]
    boundary_processes_description = ""
    reference_period_start = FIXED_NOW
    reference_period_end = FIXED_NOW + timedelta(days=364)
    exempted_emissions_percent = 0.0
    exempted_emissions_description = ""
    packaging_emissions_included = False
