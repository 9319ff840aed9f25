"""
Application constants.
"""
from datetime import timedelta
from decimal import Decimal


class ConfigFile:
    """Configuration file names."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class PactDefaults:
    """Envelope values stamped onto every generated product footprint."""
    SPEC_VERSION = "2.2.0"
    VERSION = 1
    PRODUCT_CATEGORY_CPC = "83117"
    PRODUCT_ID_URN_PREFIX = "urn:pathfinder:product:customcode:vendor-assigned"
    REFERENCE_PERIOD = timedelta(days=364)


class IleapExtension:
    """iLEAP DataModelExtension metadata."""
    SPEC_VERSION = "0.2.0"
    DATA_SCHEMA_URL = "https://api.ileap.sine.dev/{schema_id}.json"
    DOCUMENTATION_URL = "https://sine-fdn.github.io/ileap-extension/"


class DemoCompany:
    """Company the demo data is attributed to."""
    NAME = "SINE Foundation"
    URN = "urn:sine:example"


# Unit conversion constants
KG_TO_TONNES = Decimal("0.001")
HOC_DECLARED_AMOUNT_KG = Decimal("1000")
TOC_DECLARED_AMOUNT_TKM = Decimal("1")

GEOGRAPHY_REGION_KEY = "geographyRegionOrSubregion"
GEOGRAPHY_COUNTRY_KEY = "geographyCountry"
GEOGRAPHY_SUBDIVISION_KEY = "geographyCountrySubdivision"
