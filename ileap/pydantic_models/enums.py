"""
Controlled vocabularies of the PACT and iLEAP data models.

Each member's value is the exact string used on the wire.
"""
from enum import Enum


# iLEAP vocabularies
class TransportMode(str, Enum):
    ROAD = "Road"
    RAIL = "Rail"
    AIR = "Air"
    SEA = "Sea"
    INLAND_WATERWAY = "InlandWaterway"


class PackagingOrTrEqType(str, Enum):
    BOX = "Box"
    PALLET = "Pallet"
    CONTAINER_TEU = "Container-TEU"
    CONTAINER_FEU = "Container-FEU"
    CONTAINER = "Container"


class EnergyCarrierType(str, Enum):
    DIESEL = "Diesel"
    HVO = "HVO"
    PETROL = "Petrol"
    CNG = "CNG"
    LNG = "LNG"
    LPG = "LPG"
    HFO = "HFO"
    MGO = "MGO"
    AVIATION_FUEL = "Aviation fuel"
    HYDROGEN = "Hydrogen"
    METHANOL = "Methanol"
    ELECTRIC = "Electric"


class EnergyConsumptionUnit(str, Enum):
    LITER = "l"
    KILOGRAM = "kg"
    KWH = "kWh"
    MJ = "MJ"


class FeedstockType(str, Enum):
    FOSSIL = "Fossil"
    NATURAL_GAS = "Natural gas"
    GRID = "Grid"
    RENEWABLE_ELECTRICITY = "Renewable electricity"
    COOKING_OIL = "Cooking oil"


class TemperatureControl(str, Enum):
    AMBIENT = "ambient"
    REFRIGERATED = "refrigerated"
    MIXED = "mixed"


class TadTempControl(str, Enum):
    """Temperature control of a single transport activity; never mixed."""
    AMBIENT = "ambient"
    REFRIGERATED = "refrigerated"


class TruckLoadingSequence(str, Enum):
    LTL = "LTL"
    FTL = "FTL"


class AirShippingOption(str, Enum):
    BELLY_FREIGHT = "belly freight"
    FREIGHTER = "freighter"


class FlightLength(str, Enum):
    SHORT_HAUL = "short-haul"
    LONG_HAUL = "long-haul"


class HubType(str, Enum):
    TRANSSHIPMENT = "Transshipment"
    STORAGE_AND_TRANSSHIPMENT = "StorageAndTransshipment"
    WAREHOUSE = "Warehouse"
    LIQUID_BULK_TERMINAL = "LiquidBulkTerminal"
    MARITIME_CONTAINER_TERMINAL = "MaritimeContainerTerminal"


class Incoterms(str, Enum):
    EXW = "EXW"
    FCA = "FCA"
    CPT = "CPT"
    CIP = "CIP"
    DAP = "DAP"
    DPU = "DPU"
    DDP = "DDP"
    FAS = "FAS"
    FOB = "FOB"
    CFR = "CFR"
    CIF = "CIF"


class Certification(str, Enum):
    ISO14083_2023 = "ISO14083:2023"
    GLEC_V2 = "GLECv2"
    GLEC_V3 = "GLECv3"
    GLEC_V3_1 = "GLECv3.1"


class TocCo2eIntensityThroughput(str, Enum):
    """Activity unit a TOC's emission intensity is expressed per."""
    TEU_KM = "TEUkm"
    TKM = "tkm"


class HocCo2eIntensityThroughput(str, Enum):
    """Activity unit a HOC's emission intensity is expressed per."""
    TEU = "TEU"
    TONNES = "tonnes"


# PACT vocabularies
class PfStatus(str, Enum):
    ACTIVE = "Active"
    DEPRECATED = "Deprecated"


class DeclaredUnit(str, Enum):
    LITER = "liter"
    KILOGRAM = "kilogram"
    CUBIC_METER = "cubic meter"
    KILOWATT_HOUR = "kilowatt hour"
    MEGAJOULE = "megajoule"
    TON_KILOMETER = "ton kilometer"
    SQUARE_METER = "square meter"


class CrossSectoralStandard(str, Enum):
    GHGP_PRODUCT = "GHGP Product"
    ISO14067 = "ISO14067"
    ISO14044 = "ISO14044"
    ISO14083 = "ISO14083"
    ISO14040_44 = "ISO14040-44"
    PEF = "PEF"
    PACT_METHODOLOGY_2_0 = "PACT Methodology 2.0"
    PAS2050 = "PAS2050"


class CharacterizationFactors(str, Enum):
    AR5 = "AR5"
    AR6 = "AR6"


class BiogenicAccountingMethodology(str, Enum):
    PEF = "PEF"
    ISO = "ISO"
    GHPG = "GHPG"
    QUANTIS = "Quantis"


class UNRegionOrSubregion(str, Enum):
    AFRICA = "Africa"
    AMERICAS = "Americas"
    ASIA = "Asia"
    EUROPE = "Europe"
    OCEANIA = "Oceania"
    AUSTRALIA_AND_NEW_ZEALAND = "Australia and New Zealand"
    CENTRAL_ASIA = "Central Asia"
    EASTERN_ASIA = "Eastern Asia"
    EASTERN_EUROPE = "Eastern Europe"
    LATIN_AMERICA_AND_THE_CARIBBEAN = "Latin America and the Caribbean"
    MELANESIA = "Melanesia"
    MICRONESIA = "Micronesia"
    NORTHERN_AFRICA = "Northern Africa"
    NORTHERN_AMERICA = "Northern America"
    NORTHERN_EUROPE = "Northern Europe"
    POLYNESIA = "Polynesia"
    SOUTH_EASTERN_ASIA = "South-eastern Asia"
    SOUTHERN_ASIA = "Southern Asia"
    SOUTHERN_EUROPE = "Southern Europe"
    SUB_SAHARAN_AFRICA = "Sub-Saharan Africa"
    WESTERN_ASIA = "Western Asia"
    WESTERN_EUROPE = "Western Europe"


class ProductOrSectorSpecificRuleOperator(str, Enum):
    PEF = "PEF"
    EPD_INTERNATIONAL = "EPD International"
    OTHER = "Other"


class AssuranceCoverage(str, Enum):
    CORPORATE_LEVEL = "corporate level"
    PRODUCT_LINE = "product line"
    PCF_SYSTEM = "PCF system"
    PRODUCT_LEVEL = "product level"


class AssuranceLevel(str, Enum):
    LIMITED = "limited"
    REASONABLE = "reasonable"


class AssuranceBoundary(str, Enum):
    GATE_TO_GATE = "Gate-to-Gate"
    CRADLE_TO_GATE = "Cradle-to-Gate"
