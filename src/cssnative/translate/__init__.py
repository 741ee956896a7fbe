"""Declaration translator: CSS ``property: value`` pairs to native style keys.

Pairs are translated one at a time and merged in order, so a later pair
overwrites keys produced by an earlier one. Pseudo pairs of the form
``("@keyframes <name>", body)`` produce no keys themselves; they make the
named frames available to ``animation`` and ``animation-name``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from cssnative.model.stylesheet import StyleRule
from cssnative.parser import parse_css
from cssnative.translate import animation, shorthands
from cssnative.translate.transform_property import transform
from cssnative.translate.values import camel_case

__all__ = ["KEYFRAMES_PREFIX", "camel_case", "parse_keyframes", "translate_declarations"]

KEYFRAMES_PREFIX = "@keyframes "

Handler = Callable[[str, str], dict[str, Any]]

HANDLERS: dict[str, Handler] = {
    "margin": shorthands.margin,
    "padding": shorthands.padding,
    "border": shorthands.border,
    "border-width": shorthands.border_width,
    "border-color": shorthands.border_color,
    "border-radius": shorthands.border_radius,
    "border-style": shorthands.border_style,
    "flex": shorthands.flex,
    "flex-flow": shorthands.flex_flow,
    "place-content": shorthands.place_content,
    "text-decoration": shorthands.text_decoration,
    "box-shadow": shorthands.box_shadow,
    "text-shadow": shorthands.text_shadow,
    "font-family": shorthands.font_family,
    "font-weight": shorthands.font_weight,
    "aspect-ratio": shorthands.aspect_ratio,
    "background": shorthands.background,
    "transform": transform,
}

ANIMATION_HANDLERS = {
    "animation": animation.animation,
    "animation-name": animation.animation_name,
}


def parse_keyframes(body: str) -> dict[str, dict[str, Any]]:
    """Translate a keyframe body (``from { ... } to { ... }``) into frame maps."""
    frames: dict[str, dict[str, Any]] = {}
    for rule in parse_css(body).rules:
        if not isinstance(rule, StyleRule):
            continue
        styles = translate_declarations(
            (d.property, d.value) for d in rule.declarations
        )
        for selector in rule.selectors:
            frames.setdefault(selector, {}).update(styles)
    return frames


def translate_declarations(pairs: Iterable[Sequence[str]]) -> dict[str, Any]:
    """Translate ``(property, value)`` pairs into one merged style map."""
    bodies: dict[str, str] = {}
    declarations: list[tuple[str, str]] = []
    for property, value in pairs:
        if property.startswith(KEYFRAMES_PREFIX):
            bodies[property[len(KEYFRAMES_PREFIX):].strip()] = value
        else:
            declarations.append((property, value.strip()))

    parsed: dict[str, dict[str, Any]] = {}

    def resolve(name: str) -> dict[str, Any] | None:
        if name not in bodies:
            return None
        if name not in parsed:
            parsed[name] = parse_keyframes(bodies[name])
        return parsed[name]

    styles: dict[str, Any] = {}
    for property, value in declarations:
        if property in ANIMATION_HANDLERS:
            styles.update(ANIMATION_HANDLERS[property](property, value, resolve))
        else:
            handler = HANDLERS.get(property, shorthands.default)
            styles.update(handler(property, value))
    return styles
