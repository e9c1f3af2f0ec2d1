from .settings import (
    ALL_REGIONS,
    DEFAULT_MAPPING_SHEET,
    DEFAULT_REGULATIONS_SHEET,
    LOG_LEVEL,
    MAX_FILE_SIZE_MB,
    SPEND_YEARS,
    TOP_N,
    UNKNOWN_LABEL,
    UNSPECIFIED_REGION,
)

__all__ = [
    "ALL_REGIONS",
    "DEFAULT_MAPPING_SHEET",
    "DEFAULT_REGULATIONS_SHEET",
    "LOG_LEVEL",
    "MAX_FILE_SIZE_MB",
    "SPEND_YEARS",
    "TOP_N",
    "UNKNOWN_LABEL",
    "UNSPECIFIED_REGION",
]
