"""
Types package for domain style classification.

This package contains the domain value, result types, configuration and
error classes used throughout the classification engine.
"""

from domainstyle.types.config import DEFAULT_STYLE_ORDER, NumericPolicy, StyleConfig
from domainstyle.types.domain import Domain
from domainstyle.types.errors import DomainFormatError, DomainStyleError, ErrorKind, NoStyleMatchedError
from domainstyle.types.results import CacheInfo, ClassificationResult, Style, StyleKind

__all__ = [
    "DEFAULT_STYLE_ORDER",
    "CacheInfo",
    "ClassificationResult",
    "Domain",
    "DomainFormatError",
    "DomainStyleError",
    "ErrorKind",
    "NoStyleMatchedError",
    "NumericPolicy",
    "Style",
    "StyleConfig",
    "StyleKind",
]
