"""
Priority-ordered classification pipeline.

Checkers run in registration order and the first match wins, so the order
is a priority ranking: pure-number before the mixed catch-all keeps "111"
numeric, and the catch-all must stay last.
"""
from __future__ import annotations

import logging

from domainstyle.services.checkers import StyleChecker, create_checker
from domainstyle.types import Domain, NoStyleMatchedError, Style, StyleConfig, StyleKind

logger = logging.getLogger("domainstyle")


class ClassificationPipeline:
    """Ordered list of style checkers."""

    def __init__(self, config: StyleConfig | None = None):
        self._config = config or StyleConfig.create_default()
        self._checkers: list[StyleChecker] = []

    @classmethod
    def from_config(cls, config: StyleConfig | None = None) -> ClassificationPipeline:
        """Build a pipeline with every style in `config.style_order` registered."""
        pipeline = cls(config)
        for kind in pipeline._config.style_order:
            pipeline.register(kind)
        return pipeline

    @property
    def style_order(self) -> tuple[StyleKind, ...]:
        return tuple(checker.kind for checker in self._checkers)

    def register(self, checker: StyleKind | str | StyleChecker) -> None:
        """Append a checker; it is evaluated after every checker registered before it."""
        if isinstance(checker, (StyleKind, str)):
            checker = create_checker(checker, self._config)
        self._checkers.append(checker)

    def classify(self, domain: Domain) -> Style:
        """Return the style of the first checker that matches `domain`."""
        for checker in self._checkers:
            style = checker.check(domain)
            if style is not None:
                logger.debug(f"{domain.full_name}: matched {style.kind.value} (count={style.count})")
                return style
            logger.debug(f"{domain.full_name}: {checker.kind.value} declined")

        raise NoStyleMatchedError(f"no style matched '{domain.full_name}'")
