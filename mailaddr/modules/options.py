"""Настройки, определяющие допустимые расширения грамматики."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Options:
    """Неизменяемый набор переключателей грамматики.

    ``minimum_sub_domains`` задаёт минимальное число меток домена (2 требует
    наличия домена верхнего уровня). Методы ``with_*``/``without_*``
    возвращают новый экземпляр.
    """

    minimum_sub_domains: int = 0
    allow_domain_literal: bool = True
    allow_display_text: bool = True

    def __post_init__(self) -> None:
        if self.minimum_sub_domains < 0:
            raise ValueError(
                f"minimum_sub_domains must be non-negative, got {self.minimum_sub_domains}"
            )

    def with_minimum_sub_domains(self, count: int) -> "Options":
        return replace(self, minimum_sub_domains=count)

    def with_no_minimum_sub_domains(self) -> "Options":
        return replace(self, minimum_sub_domains=0)

    def with_required_tld(self) -> "Options":
        """Требует хотя бы две метки домена, например ``example.com``."""
        return replace(self, minimum_sub_domains=2)

    def with_domain_literal(self) -> "Options":
        return replace(self, allow_domain_literal=True)

    def without_domain_literal(self) -> "Options":
        return replace(self, allow_domain_literal=False)

    def with_display_text(self) -> "Options":
        return replace(self, allow_display_text=True)

    def without_display_text(self) -> "Options":
        return replace(self, allow_display_text=False)


DEFAULT_OPTIONS = Options()
