"""Static bylaw reference data."""
from .answers import ANSWERS, TOPIC_PRIORITY
from .bylaws import BYLAWS, BylawCatalog

__all__ = [
    "ANSWERS",
    "TOPIC_PRIORITY",
    "BYLAWS",
    "BylawCatalog",
]
