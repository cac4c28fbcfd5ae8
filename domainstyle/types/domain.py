from __future__ import annotations

from dataclasses import dataclass

from domainstyle.types.errors import DomainFormatError


@dataclass(frozen=True)
class Domain:
    """
    A dotted domain name split into its main label and suffix.

    >>> Domain.parse("abc.com.cn")
    Domain(full_name='abc.com.cn', main_label='abc', suffix='.com.cn')
    """

    full_name: str
    main_label: str
    suffix: str

    def __post_init__(self):
        main_label, sep, rest = self.full_name.partition(".")
        if not sep or self.main_label != main_label or self.suffix != "." + rest:
            raise DomainFormatError(
                f"'{self.main_label}' and '{self.suffix}' are not the first-dot split of '{self.full_name}'",
            )

    @classmethod
    def parse(cls, full_name: str) -> Domain:
        if not full_name:
            raise DomainFormatError("domain name must not be empty", reason="empty")

        main_label, sep, rest = full_name.partition(".")
        if not sep:
            raise DomainFormatError(f"domain name '{full_name}' has no suffix")

        return cls(full_name=full_name, main_label=main_label, suffix="." + rest)
