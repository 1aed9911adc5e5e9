"""
Core 설정 및 utilities, 커스텀 예외
"""

from pune_metro.core.config import settings

from pune_metro.core.exceptions import (
    MetroException,
    LineNotFoundException,
    StationNotFoundException,
    FarePairNotFoundException,
    InvalidArgumentException,
    ForbiddenOperationException,
    CatalogLoadException,
    PersistenceException,
)

__all__ = [
    "settings",
    "MetroException",
    "LineNotFoundException",
    "StationNotFoundException",
    "FarePairNotFoundException",
    "InvalidArgumentException",
    "ForbiddenOperationException",
    "CatalogLoadException",
    "PersistenceException",
]
