"""Tests for ``:export`` blocks."""

import pytest

from cssnative import transform, transform_to_dict
from cssnative.errors import ExportNameCollisionError
from cssnative.model.result import EXPORT_PROPS_KEY, TransformResult
from cssnative.model.stylesheet import Declaration
from cssnative.transforms.exports import collect_exports


# ---------------------------------------------------------------------------
# collect_exports
# ---------------------------------------------------------------------------


class TestCollectExports:
    def test_values_kept_raw(self) -> None:
        result = TransformResult()
        collect_exports([Declaration("primary", "#00f"), Declaration("gap", "8px")], result)
        assert result.exports == {"primary": "#00f", "gap": "8px"}

    def test_collision_with_class(self) -> None:
        result = TransformResult()
        result.styles("primary")
        with pytest.raises(ExportNameCollisionError) as exc_info:
            collect_exports([Declaration("primary", "#00f")], result)
        assert exc_info.value.name == "primary"
        assert 'already using the name "primary"' in str(exc_info.value)

    def test_repeated_export_overwrites(self) -> None:
        result = TransformResult()
        collect_exports([Declaration("a", "1")], result)
        collect_exports([Declaration("a", "2")], result)
        assert result.exports == {"a": "2"}


# ---------------------------------------------------------------------------
# Through the pipeline
# ---------------------------------------------------------------------------


class TestExportPipeline:
    def test_merged_at_top_level(self) -> None:
        out = transform_to_dict(":export { primary: #00f; } .a { color: red }")
        assert out == {"a": {"color": "red"}, "primary": "#00f"}

    def test_no_export_props_key(self) -> None:
        out = transform_to_dict(":export { primary: #00f }")
        assert EXPORT_PROPS_KEY not in out

    def test_collision_class_first(self) -> None:
        with pytest.raises(ExportNameCollisionError):
            transform(".primary { color: red } :export { primary: #00f }")

    def test_collision_export_first(self) -> None:
        with pytest.raises(ExportNameCollisionError):
            transform(":export { primary: #00f } .primary { color: red }")

    def test_export_in_selector_list(self) -> None:
        result = transform(":export, .a { b: c }")
        assert result.exports == {"b": "c"}
        assert result.classes == {"a": {"b": "c"}}

    def test_export_in_media_skipped(self) -> None:
        result = transform(
            "@media (min-width: 10px) { :export { a: b } }",
            {"parseMediaQueries": True},
        )
        assert result.exports == {}
        assert [s.selector for s in result.skipped] == [":export"]
