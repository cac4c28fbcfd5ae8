"""
Services package for domain style classification.

This package contains the service classes used by the detector, organized
by responsibility: segmentation, style checking, pipeline dispatch, Han
readings and output formatting.
"""

from domainstyle.services.checkers import (
    CHECKER_REGISTRY,
    FullPinyinChecker,
    MixedAlphaNumericChecker,
    PureInitialConsonantChecker,
    PureLetterChecker,
    PureNumberChecker,
    StyleChecker,
    create_checker,
)
from domainstyle.services.formatting import StyleFormattingService
from domainstyle.services.pipeline import ClassificationPipeline
from domainstyle.services.reading import HanReadingService
from domainstyle.services.segmentation import PinyinSegmentationService, Segmentation
from domainstyle.types import (
    CacheInfo,
    ClassificationResult,
    Domain,
    DomainFormatError,
    DomainStyleError,
    NoStyleMatchedError,
    Style,
    StyleConfig,
    StyleKind,
)

__all__ = [
    "CHECKER_REGISTRY",
    # Types (re-exported for convenience)
    "CacheInfo",
    # Services
    "ClassificationPipeline",
    "ClassificationResult",
    "Domain",
    "DomainFormatError",
    "DomainStyleError",
    # Checkers
    "FullPinyinChecker",
    "HanReadingService",
    "MixedAlphaNumericChecker",
    "NoStyleMatchedError",
    "PinyinSegmentationService",
    "PureInitialConsonantChecker",
    "PureLetterChecker",
    "PureNumberChecker",
    "Segmentation",
    "Style",
    "StyleChecker",
    "StyleConfig",
    "StyleFormattingService",
    "StyleKind",
    "create_checker",
]
