"""
Domain Style Detection Module

This module classifies the "style" of a domain name from its main label: pure
number, pure initial consonants, full pinyin, pure letters, or a mixed
catch-all of letters, digits, hyphens and Han characters.

## Overview

The core functionality is provided by the `DomainStyleDetector` class:

1. **Parsing**: The raw name is split into main label and suffix (`abc.com.cn` → `abc`, `.com.cn`)
2. **Classification**: Style checkers run in priority order and the first match wins
3. **Segmentation**: The full-pinyin checker finds the fewest syllables covering the label
4. **Reading**: Han characters in the label are annotated with their pinyin
5. **Formatting**: Results render as a localized record or message

## Usage Examples

```python
from domainstyle import DomainStyleDetector

detector = DomainStyleDetector()

result = detector.analyze("xianguang.com")
# Returns: ClassificationResult(success=True, style=Style(kind=FULL_PINYIN, count=2, ...))

result = detector.analyze("111.com")
# Returns: ClassificationResult(success=True, style=Style(kind=PURE_NUMBER, count=3))

result = detector.analyze("!!!.com")
# Returns: ClassificationResult(success=False, error_kind=NO_STYLE_MATCHED, ...)

detector.format_result(detector.analyze("jmkj.com"))
# Returns: '域名品相分析结果：{"品相": "纯声母品相", "字数": 4, "域名": "jmkj.com", ...}'

# Exception-raising variant
style = detector.classify("a1a2.com")
```

## Error Handling

- `DomainFormatError` (`ErrorKind.INVALID_FORMAT`): empty input or no dot
- `NoStyleMatchedError` (`ErrorKind.NO_STYLE_MATCHED`): every checker declined

`analyze` folds both into a failed `ClassificationResult`; `classify` raises.

## Thread Safety

The syllable dictionary and consonant tokens are immutable module-level data
and checkers keep no per-call state, so a detector can be shared across
threads.
"""

import logging

from domainstyle.services import (
    CacheInfo,
    ClassificationPipeline,
    ClassificationResult,
    Domain,
    DomainStyleError,
    HanReadingService,
    Style,
    StyleConfig,
    StyleFormattingService,
)

logger = logging.getLogger("domainstyle")


class DomainStyleDetector:
    """Main domain style classification service."""

    def __init__(self, config: StyleConfig | None = None):
        self._config = config or StyleConfig.create_default()
        self._pipeline = ClassificationPipeline.from_config(self._config)
        self._reading_service = HanReadingService(self._config)
        self._formatting_service = StyleFormattingService(self._config)

    @property
    def config(self) -> StyleConfig:
        return self._config

    # Public API methods
    def get_cache_info(self) -> CacheInfo:
        """Get Han reading cache information."""
        return self._reading_service.get_cache_info()

    def clear_reading_cache(self) -> None:
        self._reading_service.clear_cache()

    def classify(self, raw_name: str) -> Style:
        """Classify a raw domain name, raising `DomainStyleError` on failure."""
        return self._pipeline.classify(Domain.parse(raw_name))

    def analyze(self, raw_name: str) -> ClassificationResult:
        """
        Main API method: classify a raw domain name.

        Returns ClassificationResult with:
        - success=True, style=matched style if a checker matched
        - success=False, error_kind/error_message if the input is malformed or no style matched
        """
        try:
            domain = Domain.parse(raw_name)
            style = self._pipeline.classify(domain)
        except DomainStyleError as e:
            logger.debug(f"{raw_name!r}: {e.kind.value}: {e.message}")
            return ClassificationResult.failure(raw_name, e)

        reading = ()
        if self._reading_service.has_han(domain.main_label):
            reading = self._reading_service.reading(domain.main_label)
        return ClassificationResult.success_with_style(raw_name, style, reading)

    def analyze_batch(self, names: list[str]) -> list[ClassificationResult]:
        """Classify several names, preserving their order."""
        return [self.analyze(name) for name in names]

    def format_result(self, result: ClassificationResult) -> str:
        """Render a result as a localized one-line message."""
        return self._formatting_service.format_message(result)

    def to_record(self, result: ClassificationResult) -> dict:
        """Render a successful result as a localized response record."""
        return self._formatting_service.to_record(result)
