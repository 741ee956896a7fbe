"""Tests for the per-rule declaration transform."""

import pytest

from cssnative.errors import UnparsableDeclarationError
from cssnative.model.result import TransformResult
from cssnative.model.stylesheet import Declaration
from cssnative.transforms.declarations import (
    DeclarationKind,
    declaration_kind,
    transform_declarations,
)


def _run(*pairs: tuple[str, str], keyframes=None, rem_size: float = 16.0):
    styles: dict = {}
    result = TransformResult()
    declarations = [Declaration(p, v) for p, v in pairs]
    transform_declarations(styles, declarations, result, keyframes, rem_size=rem_size)
    return styles, result


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestDeclarationKind:
    @pytest.mark.parametrize(
        "prop", ["border-radius", "border-width", "border-color", "border-style"]
    )
    def test_border_shorthands(self, prop: str) -> None:
        assert declaration_kind(prop, None) is DeclarationKind.BORDER_SHORTHAND

    def test_animation_needs_keyframes(self) -> None:
        assert declaration_kind("animation", None) is DeclarationKind.DEFAULT
        assert declaration_kind("animation", {}) is DeclarationKind.DEFAULT
        assert declaration_kind("animation", {"x": "from {}"}) is DeclarationKind.ANIMATION
        assert declaration_kind("animation-name", {"x": "from {}"}) is DeclarationKind.ANIMATION

    def test_everything_else(self) -> None:
        assert declaration_kind("color", {"x": "from {}"}) is DeclarationKind.DEFAULT
        assert declaration_kind("border", None) is DeclarationKind.DEFAULT


# ---------------------------------------------------------------------------
# Border shorthands
# ---------------------------------------------------------------------------


class TestBorderShorthands:
    def test_uniform_radius_collapses(self) -> None:
        styles, _ = _run(("border-radius", "4px"))
        assert styles == {"borderRadius": 4}

    def test_uniform_width_collapses(self) -> None:
        styles, _ = _run(("border-width", "2px 2px"))
        assert styles == {"borderWidth": 2}

    def test_uniform_color_collapses(self) -> None:
        styles, _ = _run(("border-color", "red"))
        assert styles == {"borderColor": "red"}

    def test_border_style(self) -> None:
        styles, _ = _run(("border-style", "dotted"))
        assert styles == {"borderStyle": "dotted"}

    def test_mixed_values_stay_expanded(self) -> None:
        styles, _ = _run(("border-radius", "4px 8px"))
        assert styles == {
            "borderTopLeftRadius": 4,
            "borderTopRightRadius": 8,
            "borderBottomRightRadius": 4,
            "borderBottomLeftRadius": 8,
        }


# ---------------------------------------------------------------------------
# line-height
# ---------------------------------------------------------------------------


class TestLineHeight:
    @pytest.mark.parametrize(
        "value, expected",
        [("0", 0), ("1.5", 1.5), ("20px", 20), ("150%", "150%"), ("5vh", "5vh")],
    )
    def test_accepted(self, value: str, expected) -> None:
        styles, _ = _run(("line-height", value))
        assert styles == {"lineHeight": expected}

    def test_rem_converted_first(self) -> None:
        styles, _ = _run(("line-height", "1.5rem"))
        assert styles == {"lineHeight": 24}

    @pytest.mark.parametrize("value", ["normal", "calc(1px + 2px)", "10 px"])
    def test_rejected(self, value: str) -> None:
        with pytest.raises(UnparsableDeclarationError) as exc_info:
            _run(("line-height", value))
        assert exc_info.value.property == "line-height"

    def test_unsupported_unit_fails_in_translator(self) -> None:
        with pytest.raises(UnparsableDeclarationError, match='"line-height: 10em"'):
            _run(("line-height", "10em"))


# ---------------------------------------------------------------------------
# Units and flags
# ---------------------------------------------------------------------------


class TestUnits:
    def test_rem_to_px(self) -> None:
        styles, _ = _run(("font-size", "2rem"))
        assert styles == {"fontSize": 32}

    def test_custom_rem_size(self) -> None:
        styles, _ = _run(("font-size", "2rem"), rem_size=10)
        assert styles == {"fontSize": 20}

    def test_rem_inside_shorthand(self) -> None:
        styles, _ = _run(("margin", "1rem 0"))
        assert styles["marginTop"] == 16
        assert styles["marginRight"] == 0

    def test_viewport_flag(self) -> None:
        styles, result = _run(("height", "100vh"))
        assert styles == {"height": "100vh"}
        assert result.uses_viewport_units is True

    def test_no_viewport_flag(self) -> None:
        _, result = _run(("height", "100px"), ("width", "50%"))
        assert result.uses_viewport_units is False

    def test_viewport_flag_only_for_whole_value(self) -> None:
        _, result = _run(("margin", "10vh 0"))
        assert result.uses_viewport_units is False


class TestMerging:
    def test_last_declaration_wins(self) -> None:
        styles, _ = _run(("color", "red"), ("color", "blue"))
        assert styles == {"color": "blue"}

    def test_merges_into_existing_styles(self) -> None:
        styles = {"color": "red"}
        transform_declarations(styles, [Declaration("opacity", "0")], TransformResult())
        assert styles == {"color": "red", "opacity": 0}

    def test_non_declarations_skipped(self) -> None:
        styles: dict = {}
        transform_declarations(styles, ["junk", Declaration("color", "red")], TransformResult())
        assert styles == {"color": "red"}


class TestAnimation:
    SPIN = "from { transform: rotate(0deg) } to { transform: rotate(360deg) }"

    def test_binds_extracted_keyframes(self) -> None:
        styles, _ = _run(("animation-name", "spin"), keyframes={"spin": self.SPIN})
        assert styles == {
            "animationName": {
                "from": {"transform": [{"rotate": "0deg"}]},
                "to": {"transform": [{"rotate": "360deg"}]},
            }
        }

    def test_unknown_name_without_keyframes(self) -> None:
        styles, _ = _run(("animation", "spin 1s"))
        assert styles == {"animationName": "spin", "animationDuration": "1s"}
