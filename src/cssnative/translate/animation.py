"""``animation`` and ``animation-name``, with keyframe binding.

When a referenced name has a keyframe body available, ``animationName``
holds the translated frames instead of the name::

    {"animationName": {"from": {"opacity": 0}, "to": {"opacity": 1}}}
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from cssnative.errors import UnparsableDeclarationError
from cssnative.translate.values import NUMBER_RE, TIME_RE, split_commas, split_tokens, to_number

FrameResolver = Callable[[str], Optional[dict[str, Any]]]

TIMING_KEYWORDS = frozenset({
    "linear", "ease", "ease-in", "ease-out", "ease-in-out", "step-start", "step-end",
})
TIMING_FUNCTIONS = ("cubic-bezier(", "steps(", "linear(")
DIRECTIONS = frozenset({"normal", "reverse", "alternate", "alternate-reverse"})
FILL_MODES = frozenset({"forwards", "backwards", "both"})
PLAY_STATES = frozenset({"running", "paused"})

# Initial values used to pad lists when several animations are declared.
_INITIAL = {
    "animationName": "none",
    "animationDuration": "0s",
    "animationTimingFunction": "ease",
    "animationDelay": "0s",
    "animationIterationCount": 1,
    "animationDirection": "normal",
    "animationFillMode": "none",
    "animationPlayState": "running",
}


def _bind(name: str, resolve: FrameResolver | None) -> Any:
    if resolve is not None:
        frames = resolve(name)
        if frames is not None:
            return frames
    return name


def _single_animation(property: str, value: str, item: str, resolve: FrameResolver | None) -> dict[str, Any]:
    out: dict[str, Any] = {}

    def put(key: str, token: Any) -> None:
        if key in out:
            raise UnparsableDeclarationError(property, value)
        out[key] = token

    for token in split_tokens(item):
        if TIME_RE.match(token):
            put("animationDelay" if "animationDuration" in out else "animationDuration", token)
        elif token in TIMING_KEYWORDS or token.startswith(TIMING_FUNCTIONS):
            put("animationTimingFunction", token)
        elif token == "infinite":
            put("animationIterationCount", token)
        elif NUMBER_RE.match(token):
            put("animationIterationCount", to_number(token))
        elif token in DIRECTIONS:
            put("animationDirection", token)
        elif token in FILL_MODES or (token == "none" and "animationName" in out):
            put("animationFillMode", token)
        elif token in PLAY_STATES:
            put("animationPlayState", token)
        else:
            put("animationName", _bind(token, resolve))
    return out


def animation(property: str, value: str, resolve: FrameResolver | None = None) -> dict[str, Any]:
    """Expand the ``animation`` shorthand into longhand keys.

    One animation yields only the keys it sets; several comma-separated
    animations yield aligned lists for every longhand.
    """
    items = [_single_animation(property, value, item, resolve) for item in split_commas(value)]
    if not items:
        raise UnparsableDeclarationError(property, value)
    if len(items) == 1:
        return items[0]
    return {key: [item.get(key, initial) for item in items] for key, initial in _INITIAL.items()}


def animation_name(property: str, value: str, resolve: FrameResolver | None = None) -> dict[str, Any]:
    names = [_bind(name, resolve) for name in split_commas(value)]
    if not names:
        raise UnparsableDeclarationError(property, value)
    return {"animationName": names[0] if len(names) == 1 else names}
