"""``:export`` blocks: named values surfaced at the top level of the result."""

from __future__ import annotations

from typing import Iterable

from cssnative.errors import ExportNameCollisionError
from cssnative.model.result import TransformResult
from cssnative.model.stylesheet import Declaration

__all__ = ["collect_exports"]


def collect_exports(declarations: Iterable[Declaration], result: TransformResult) -> None:
    """Record every ``name: value`` of an export block on *result*.

    A name already used by a class selector raises ExportNameCollisionError,
    unless an earlier export created it, in which case the value is replaced.
    """
    for declaration in declarations:
        if not isinstance(declaration, Declaration):
            continue
        name = declaration.property
        if name in result.classes and name not in result.exports:
            raise ExportNameCollisionError(name)
        result.exports[name] = declaration.value
