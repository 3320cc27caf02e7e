"""Common models - base classes and shared tables."""

from app.models.common.base import BaseEntity
from app.models.common.cache import CACHE_DDL
from app.models.common.meta import META_DDL

__all__ = [
    "BaseEntity",
    "CACHE_DDL",
    "META_DDL",
]
