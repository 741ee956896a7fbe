"""Parsed media query structure."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaExpression:
    """One ``(feature: value)`` test, e.g. ``(min-width: 100px)``.

    Attributes:
        feature: Feature name without modifier (``width``).
        modifier: ``"min"``, ``"max"`` or None.
        value: Raw value text, or None for boolean tests like ``(color)``.
    """

    feature: str
    modifier: str | None = None
    value: str | None = None

    @property
    def name(self) -> str:
        if self.modifier:
            return f"{self.modifier}-{self.feature}"
        return self.feature

    def __str__(self) -> str:
        if self.value:
            return f"({self.name}: {self.value})"
        return f"({self.name})"

    def to_dict(self) -> dict[str, str | None]:
        return {"modifier": self.modifier, "feature": self.feature, "value": self.value}


@dataclass(frozen=True)
class MediaQuery:
    """One comma-separated alternative of a media query list."""

    type: str
    expressions: tuple[MediaExpression, ...] = ()
    inverse: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "inverse": self.inverse,
            "type": self.type,
            "expressions": [e.to_dict() for e in self.expressions],
        }
