"""Declaration transform: validate, normalize, and translate one rule block."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping

from cssnative.errors import UnparsableDeclarationError
from cssnative.model.result import StyleMap, TransformResult
from cssnative.model.stylesheet import Declaration
from cssnative.translate import KEYFRAMES_PREFIX, camel_case, translate_declarations
from cssnative.units import (
    LENGTH_RE,
    PERCENT_RE,
    UNSUPPORTED_UNIT_RE,
    VIEWPORT_UNIT_RE,
    rem_to_px,
)

__all__ = ["DeclarationKind", "declaration_kind", "transform_declarations"]

SHORTHAND_BORDER_PROPERTIES = frozenset({
    "border-radius",
    "border-width",
    "border-color",
    "border-style",
})
ANIMATION_PROPERTIES = frozenset({"animation", "animation-name"})


class DeclarationKind(Enum):
    """How a declaration is lowered, chosen by property name."""

    BORDER_SHORTHAND = "border-shorthand"
    ANIMATION = "animation"
    DEFAULT = "default"


def declaration_kind(property: str, keyframes: Mapping[str, str] | None) -> DeclarationKind:
    if property in SHORTHAND_BORDER_PROPERTIES:
        return DeclarationKind.BORDER_SHORTHAND
    if property in ANIMATION_PROPERTIES and keyframes:
        return DeclarationKind.ANIMATION
    return DeclarationKind.DEFAULT


def _all_equal(values: list[Any]) -> bool:
    return all(v == values[0] for v in values[1:])


def _lower_border_shorthand(property: str, value: str) -> StyleMap:
    # Four identical directional values fold back into the single shorthand
    # key, which the runtime supports natively (e.g. on images).
    expanded = translate_declarations([(property, value)])
    values = list(expanded.values())
    if values and _all_equal(values):
        return {camel_case(property): values[0]}
    return expanded


def _lower_animation(property: str, value: str, keyframes: Mapping[str, str]) -> StyleMap:
    pairs = [(KEYFRAMES_PREFIX + name, body) for name, body in keyframes.items()]
    pairs.append((property, value))
    return translate_declarations(pairs)


def transform_declarations(
    styles: StyleMap,
    declarations: Iterable[Any],
    result: TransformResult,
    keyframes: Mapping[str, str] | None = None,
    *,
    rem_size: float = 16.0,
) -> None:
    """Translate *declarations* in order, merging the output into *styles*.

    Later declarations overwrite keys set by earlier ones. Raises
    UnparsableDeclarationError for a ``line-height`` value that is not a
    number, length, viewport length, or percentage.
    """
    for declaration in declarations:
        if not isinstance(declaration, Declaration):
            continue

        property = declaration.property
        value = rem_to_px(declaration.value, rem_size)

        is_length = LENGTH_RE.match(value) is not None
        is_viewport = VIEWPORT_UNIT_RE.match(value) is not None
        is_percent = PERCENT_RE.match(value) is not None
        is_unsupported_unit = UNSUPPORTED_UNIT_RE.match(value) is not None

        if property == "line-height" and not (
            is_length or is_viewport or is_percent or is_unsupported_unit
        ):
            raise UnparsableDeclarationError(property, value)

        if is_viewport:
            result.uses_viewport_units = True

        kind = declaration_kind(property, keyframes)
        if kind is DeclarationKind.BORDER_SHORTHAND:
            styles.update(_lower_border_shorthand(property, value))
        elif kind is DeclarationKind.ANIMATION:
            styles.update(_lower_animation(property, value, keyframes or {}))
        else:
            styles.update(translate_declarations([(property, value)]))
