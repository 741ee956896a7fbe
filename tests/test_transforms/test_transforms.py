"""Tests for the full transform pipeline."""

import pytest

from cssnative import (
    SkipReason,
    TransformOptions,
    TransformResult,
    transform,
    transform_to_dict,
)
from cssnative.errors import CssParseError, UnparsableDeclarationError

SPIN = (
    "@keyframes spin { 0% { transform: rotate(0deg) } 100% { transform: rotate(360deg) } }"
)


# ---------------------------------------------------------------------------
# Style rules
# ---------------------------------------------------------------------------


class TestStyleRules:
    def test_one_key_per_class(self) -> None:
        out = transform_to_dict(".a { color: red } .b { opacity: 0.5 } .a { margin-top: 4px }")
        assert out == {"a": {"color": "red", "marginTop": 4}, "b": {"opacity": 0.5}}

    def test_uniform_shorthand_collapses(self) -> None:
        assert transform_to_dict(".foo { border-radius: 4px }") == {"foo": {"borderRadius": 4}}

    def test_mixed_shorthand_expands(self) -> None:
        out = transform_to_dict(".foo { border-width: 1px 2px 3px 4px }")
        assert out == {
            "foo": {
                "borderTopWidth": 1,
                "borderRightWidth": 2,
                "borderBottomWidth": 3,
                "borderLeftWidth": 4,
            }
        }

    def test_later_rule_wins(self) -> None:
        out = transform_to_dict(".a { color: red } .a { color: blue }")
        assert out == {"a": {"color": "blue"}}

    def test_selector_list(self) -> None:
        out = transform_to_dict(".a, .b { color: red }")
        assert out == {"a": {"color": "red"}, "b": {"color": "red"}}

    def test_root_variables(self) -> None:
        out = transform_to_dict(":root { --gap: 8px }")
        assert out == {":root": {"--gap": "8px"}}

    def test_empty_source(self) -> None:
        assert transform_to_dict("") == {}


class TestLineHeight:
    @pytest.mark.parametrize("value", ["1.5", "50%", "10px"])
    def test_accepted(self, value: str) -> None:
        assert "lineHeight" in transform_to_dict(f".a {{ line-height: {value} }}")["a"]

    def test_em_rejected(self) -> None:
        with pytest.raises(UnparsableDeclarationError):
            transform(".a { line-height: 10em }")


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectors:
    @pytest.mark.parametrize(
        "css",
        [
            ".a .b { color: red }",
            ".a[data-x] { color: red }",
            ".a > .b { color: red }",
            ".a:hover { color: red }",
            "div { color: red }",
        ],
    )
    def test_rejected_silently(self, css: str) -> None:
        result = transform(css)
        assert result.classes == {}
        assert result.to_dict() == {}
        assert [s.reason for s in result.skipped] == [SkipReason.UNSUPPORTED_SELECTOR]

    def test_part_selectors_opt_in(self) -> None:
        css = ".btn::part(label) { color: red }"
        assert transform_to_dict(css) == {}
        out = transform_to_dict(css, TransformOptions(parse_part_selectors=True))
        assert out == {"btn::part(label)": {"color": "red"}}

    def test_ignore_rule(self) -> None:
        options = TransformOptions(ignore_rule=lambda s: s == ".hidden")
        result = transform(".hidden { color: red } .shown { color: blue }", options)
        assert result.classes == {"shown": {"color": "blue"}}
        assert result.skipped[0].reason is SkipReason.IGNORED_BY_PREDICATE

    def test_ignore_rule_must_return_true(self) -> None:
        options = TransformOptions(ignore_rule=lambda s: "yes")  # type: ignore[arg-type, return-value]
        assert transform(".a { color: red }", options).classes == {"a": {"color": "red"}}


# ---------------------------------------------------------------------------
# Keyframes
# ---------------------------------------------------------------------------


class TestKeyframes:
    def test_animation_name_bound(self) -> None:
        out = transform_to_dict(
            SPIN + " .a { animation-name: spin }", {"parseKeyframes": True}
        )
        assert out == {
            "a": {
                "animationName": {
                    "0%": {"transform": [{"rotate": "0deg"}]},
                    "100%": {"transform": [{"rotate": "360deg"}]},
                }
            }
        }

    def test_keyframes_skipped_when_disabled(self) -> None:
        result = transform(SPIN + " .a { animation-name: spin }")
        assert result.classes == {"a": {"animationName": "spin"}}
        assert result.skipped[-1].selector == "@keyframes"
        assert result.skipped[-1].reason is SkipReason.UNSUPPORTED_RULE


# ---------------------------------------------------------------------------
# Wire format and options
# ---------------------------------------------------------------------------


class TestWireFormat:
    def test_viewport_flag(self) -> None:
        assert transform_to_dict(".a { width: 50vw }") == {
            "a": {"width": "50vw"},
            "__viewportUnits": True,
        }

    def test_no_sentinels_by_default(self) -> None:
        out = transform_to_dict(".a { width: 50% }")
        assert "__viewportUnits" not in out
        assert "__mediaQueries" not in out
        assert "__exportProps" not in out

    def test_other_at_rules_skipped(self) -> None:
        result = transform('@import url("x.css"); @font-face { font-family: X } .a { color: red }')
        assert result.to_dict() == {"a": {"color": "red"}}
        assert {str(s) for s in result.skipped} == {
            "@import: unsupported rule",
            "@font-face: unsupported rule",
        }

    def test_selectors_inside_supports_skipped(self) -> None:
        result = transform("@supports (display: grid) { a:hover { color: red } } .a { color: red }")
        assert result.to_dict() == {"a": {"color": "red"}}
        assert [str(s) for s in result.skipped] == ["@supports: unsupported rule"]

    def test_data_url_value(self) -> None:
        out = transform_to_dict(".a { background-image: url(data:image/png;base64,AAA) }")
        assert out == {"a": {"backgroundImage": "url(data:image/png;base64,AAA)"}}

    def test_to_dict_copies(self) -> None:
        result = transform(".a { color: red }")
        result.to_dict()["a"]["color"] = "blue"
        assert result.classes["a"]["color"] == "red"


class TestOptions:
    def test_mapping_camel_case(self) -> None:
        options = TransformOptions.from_mapping(
            {"parseKeyframes": True, "parseMediaQueries": True, "remSize": 10, "unknown": 1}
        )
        assert options == TransformOptions(
            parse_keyframes=True, parse_media_queries=True, rem_size=10
        )

    def test_mapping_snake_case(self) -> None:
        options = TransformOptions.from_mapping({"parse_part_selectors": True})
        assert options.parse_part_selectors is True

    def test_rem_size(self) -> None:
        out = transform_to_dict(".a { font-size: 2rem }", {"remSize": 10})
        assert out == {"a": {"fontSize": 20}}


class TestPipeline:
    CSS = SPIN + """
    .a { animation: spin 1s linear; height: 10vh }
    @media (max-width: 400px) { .a { color: red } }
    :export { brand: blue }
    """
    OPTIONS = {"parseKeyframes": True, "parseMediaQueries": True}

    def test_returns_typed_result(self) -> None:
        result = transform(self.CSS, self.OPTIONS)
        assert isinstance(result, TransformResult)
        assert set(result.classes) == {"a"}
        assert set(result.media) == {"@media (max-width: 400px)"}
        assert result.exports == {"brand": "blue"}
        assert result.uses_viewport_units is True

    def test_idempotent(self) -> None:
        first = transform_to_dict(self.CSS, self.OPTIONS)
        second = transform_to_dict(self.CSS, self.OPTIONS)
        assert first == second

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(CssParseError):
            transform(".a { color: red")
