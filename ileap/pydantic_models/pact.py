"""
Pydantic models for the PACT Tech Spec v2 product footprint envelope.

``ProductFootprint`` is generic over the payload carried by its
DataModelExtensions, e.g. ``ProductFootprint[ShipmentFootprint]``.
"""
from datetime import datetime
from typing import Annotated, Any, Generic, Iterable, Literal, TypeVar, Union

from pydantic import (
    ConfigDict,
    Field,
    StrictBool,
    model_serializer,
    model_validator,
)
from pydantic.json_schema import SkipJsonSchema

from ileap.pydantic_models.base import IleapBaseModel, without_none
from ileap.pydantic_models.enums import (
    AssuranceBoundary,
    AssuranceCoverage,
    AssuranceLevel,
    BiogenicAccountingMethodology,
    CharacterizationFactors,
    DeclaredUnit,
    PfStatus,
    ProductOrSectorSpecificRuleOperator,
    UNRegionOrSubregion,
)
from ileap.pydantic_models.scalars import (
    CompanyIdSet,
    CrossSectoralStandardSet,
    ExemptedEmissionsPercent,
    FloatBetween1and3,
    IpccCharacterizationFactorsSources,
    ISO3166CC,
    NegativeDecimal,
    NonEmptyList,
    NonEmptyPfIdList,
    NonEmptyString,
    NonEmptyStringList,
    Percent,
    PfId,
    PositiveDecimal,
    ProductIdSet,
    SpecVersionString,
    StrictlyPositiveDecimal,
    UniqueNonEmptyList,
    VersionInteger,
    WrappedDecimal,
)
from ileap.utils.constants import (
    GEOGRAPHY_COUNTRY_KEY,
    GEOGRAPHY_REGION_KEY,
    GEOGRAPHY_SUBDIVISION_KEY,
)

T = TypeVar("T")

GEOGRAPHY_KEYS = (
    GEOGRAPHY_REGION_KEY,
    GEOGRAPHY_COUNTRY_KEY,
    GEOGRAPHY_SUBDIVISION_KEY,
)


# Geographic scope
class GlobalScope(IleapBaseModel):
    kind: Literal["global"] = "global"

    def to_wire(self) -> dict[str, str]:
        return {}


class RegionalScope(IleapBaseModel):
    kind: Literal["regional"] = "regional"
    region: UNRegionOrSubregion

    def to_wire(self) -> dict[str, str]:
        return {GEOGRAPHY_REGION_KEY: self.region.value}


class CountryScope(IleapBaseModel):
    kind: Literal["country"] = "country"
    country: ISO3166CC

    def to_wire(self) -> dict[str, str]:
        return {GEOGRAPHY_COUNTRY_KEY: self.country.root}


class SubdivisionScope(IleapBaseModel):
    kind: Literal["subdivision"] = "subdivision"
    subdivision: NonEmptyString

    def to_wire(self) -> dict[str, str]:
        return {GEOGRAPHY_SUBDIVISION_KEY: self.subdivision.root}


GeographicScope = Annotated[
    Union[GlobalScope, RegionalScope, CountryScope, SubdivisionScope],
    Field(discriminator="kind"),
]

_SCOPE_BY_KEY = {
    GEOGRAPHY_REGION_KEY: ("regional", "region"),
    GEOGRAPHY_COUNTRY_KEY: ("country", "country"),
    GEOGRAPHY_SUBDIVISION_KEY: ("subdivision", "subdivision"),
}


def _add_geography_schema(schema: dict[str, Any]) -> None:
    """Describe the flattened geography keys, at most one of which may be set."""
    schema["properties"][GEOGRAPHY_REGION_KEY] = {
        "title": "Geographyregionorsubregion",
        "type": "string",
        "enum": [region.value for region in UNRegionOrSubregion],
    }
    schema["properties"][GEOGRAPHY_COUNTRY_KEY] = {
        "title": "Geographycountry",
        "type": "string",
        "pattern": "^[A-Z]{2}$",
    }
    schema["properties"][GEOGRAPHY_SUBDIVISION_KEY] = {
        "title": "Geographycountrysubdivision",
        "type": "string",
        "minLength": 1,
    }
    region, country, subdivision = GEOGRAPHY_KEYS
    schema["not"] = {
        "anyOf": [
            {"required": [region, country]},
            {"required": [region, subdivision]},
            {"required": [country, subdivision]},
        ]
    }


# CarbonFootprint building blocks
class EmissionFactorDS(IleapBaseModel):
    name: NonEmptyString
    version: NonEmptyString


class ProductOrSectorSpecificRule(IleapBaseModel):
    operator: ProductOrSectorSpecificRuleOperator
    rule_names: NonEmptyStringList
    other_operator_name: NonEmptyString | None = None


class DataQualityIndicators(IleapBaseModel):
    coverage_percent: Percent
    technological_dqr: FloatBetween1and3 = Field(..., alias="technologicalDQR")
    temporal_dqr: FloatBetween1and3 = Field(..., alias="temporalDQR")
    geographical_dqr: FloatBetween1and3 = Field(..., alias="geographicalDQR")
    completeness_dqr: FloatBetween1and3 = Field(..., alias="completenessDQR")
    reliability_dqr: FloatBetween1and3 = Field(..., alias="reliabilityDQR")


class Assurance(IleapBaseModel):
    assurance: StrictBool
    coverage: AssuranceCoverage | None = None
    level: AssuranceLevel | None = None
    boundary: AssuranceBoundary | None = None
    provider_name: str
    completed_at: datetime | None = None
    standard_name: str | None = None
    comments: str | None = None


EmissionFactorDSSet = UniqueNonEmptyList[EmissionFactorDS]
ProductOrSectorSpecificRuleSet = UniqueNonEmptyList[ProductOrSectorSpecificRule]


class CarbonFootprint(IleapBaseModel):
    """
    Data type "CarbonFootprint" of the PACT Tech Spec v2.

    The geographic scope is held as a single variant in memory and flattened
    into the ``geography*`` keys on the wire. Reading a record that sets more
    than one of those keys fails; reading one that sets none yields
    ``GlobalScope``.
    """

    model_config = ConfigDict(json_schema_extra=_add_geography_schema)

    declared_unit: DeclaredUnit
    unitary_product_amount: StrictlyPositiveDecimal
    p_cf_excluding_biogenic: PositiveDecimal
    p_cf_including_biogenic: WrappedDecimal | None = None
    fossil_ghg_emissions: PositiveDecimal
    fossil_carbon_content: PositiveDecimal
    biogenic_carbon_content: PositiveDecimal
    d_luc_ghg_emissions: PositiveDecimal | None = None
    land_management_ghg_emissions: PositiveDecimal | None = None
    other_biogenic_ghg_emissions: PositiveDecimal | None = None
    i_luc_ghg_emissions: PositiveDecimal | None = None
    biogenic_carbon_withdrawal: NegativeDecimal | None = None
    aircraft_ghg_emissions: PositiveDecimal | None = None
    characterization_factors: CharacterizationFactors
    ipcc_characterization_factors_sources: IpccCharacterizationFactorsSources
    cross_sectoral_standards_used: CrossSectoralStandardSet
    product_or_sector_specific_rules: ProductOrSectorSpecificRuleSet | None = None
    biogenic_accounting_methodology: BiogenicAccountingMethodology | None = None
    boundary_processes_description: str
    reference_period_start: datetime
    reference_period_end: datetime
    geographic_scope: SkipJsonSchema[GeographicScope] = Field(
        default_factory=GlobalScope, exclude=True
    )
    secondary_emission_factor_sources: EmissionFactorDSSet | None = None
    exempted_emissions_percent: ExemptedEmissionsPercent
    exempted_emissions_description: str
    packaging_emissions_included: StrictBool
    packaging_ghg_emissions: PositiveDecimal | None = None
    allocation_rules_description: str | None = None
    uncertainty_assessment_description: str | None = None
    primary_data_share: Percent | None = None
    dqi: DataQualityIndicators | None = None
    assurance: Assurance | None = None

    @model_validator(mode="before")
    @classmethod
    def unflatten_geography(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        present = []
        for key in GEOGRAPHY_KEYS:
            value = data.pop(key, None)
            if value is not None:
                present.append((key, value))
        if len(present) > 1:
            keys = ", ".join(key for key, _ in present)
            raise ValueError(f"at most one geography property may be set, got {keys}")
        if present:
            if "geographic_scope" in data or "geographicScope" in data:
                raise ValueError("geographic scope given both flattened and nested")
            key, value = present[0]
            kind, field = _SCOPE_BY_KEY[key]
            data["geographic_scope"] = {"kind": kind, field: value}
        return data

    @model_validator(mode="after")
    def check_reference_period(self) -> "CarbonFootprint":
        if self.reference_period_end <= self.reference_period_start:
            raise ValueError("referencePeriodEnd must be after referencePeriodStart")
        return self

    @model_serializer(mode="wrap")
    def serialize_record(self, handler):
        data = without_none(handler(self))
        data.update(self.geographic_scope.to_wire())
        return data


class DataModelExtension(IleapBaseModel, Generic[T]):
    spec_version: SpecVersionString
    data_schema: str
    documentation: str | None = None
    data: T


class ProductFootprint(IleapBaseModel, Generic[T]):
    """Data type "ProductFootprint" of the PACT Tech Spec v2."""

    id: PfId
    spec_version: SpecVersionString
    preceding_pf_ids: NonEmptyPfIdList | None = None
    version: VersionInteger
    created: datetime
    updated: datetime | None = None
    status: PfStatus
    status_comment: str | None = None
    validity_period_start: datetime | None = None
    validity_period_end: datetime | None = None
    company_name: NonEmptyString
    company_ids: CompanyIdSet
    product_description: str
    product_ids: ProductIdSet
    product_category_cpc: NonEmptyString
    product_name_company: NonEmptyString
    comment: str
    pcf: CarbonFootprint
    extensions: NonEmptyList[DataModelExtension[T]] | None = None

    @model_validator(mode="after")
    def check_updated(self) -> "ProductFootprint[T]":
        if self.updated is not None and self.updated <= self.created:
            raise ValueError("updated must be after created")
        return self

    def revise(
        self, now: datetime, preceding_pf_ids: Iterable[PfId] = ()
    ) -> "ProductFootprint[T]":
        """
        Create the next revision of this footprint.

        The revision is rebuilt through validation, so ``now`` has to be
        later than ``created`` and than any earlier ``updated``.

        Args:
            now: Timestamp of the revision
            preceding_pf_ids: Footprints superseded by this revision, appended
                to ``precedingPfIds`` unless already listed

        Returns:
            Copy with ``version`` incremented and ``updated`` set to ``now``
        """
        if self.updated is not None and now <= self.updated:
            raise ValueError(f"revision at {now} is not after the last update")

        chain = list(self.preceding_pf_ids or [])
        for pf_id in preceding_pf_ids:
            if pf_id not in chain:
                chain.append(pf_id)

        fields = {name: getattr(self, name) for name in type(self).model_fields}
        fields.update(
            version=VersionInteger(self.version.root + 1),
            updated=now,
            preceding_pf_ids=chain or None,
        )
        return type(self).model_validate(fields)
