"""Babel compile and JS minify workers."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from asset_streams.optimizers import JsMinifyOptions, js_minify, js_transpile, random_id

from .optimize import Optimizer, OptimizeTransform

# ES2015 -> ES5 without rewriting import/export; helpers are referenced from a
# shared `babelHelpers` global instead of being inlined into every file.
JS_COMPILE_OPTIONS: dict[str, Any] = {
    "presets": [["es2015", {"modules": False}]],
    "plugins": [
        "external-helpers",
        "transform-object-rest-spread",
    ],
    # Babel 6 has no dynamic-import plugin; the parser flag keeps import() as-is
    "parserOpts": {"plugins": ["objectRestSpread", "dynamicImport"]},
}

JS_MINIFY_OPTIONS = JsMinifyOptions()

# _templateObject, _templateObject2, ... as whole words
_TEMPLATE_OBJECT_RE = re.compile(r"\b(_templateObject\d*)\b")


def rename_template_objects(code: str, make_id: Callable[[], str] = random_id) -> str:
    """Suffix Babel's tagged-template cache variables with a per-call unique id.

    Separately compiled files all name these `_templateObject`, `_templateObject2`,
    ... so they collide once concatenated into one bundle. Every occurrence in
    ``code`` gets the same suffix, so references within the file still agree:

        _templateObject  -> _templateObject_200817b1154811e887be8b38cea68555
        _templateObject2 -> _templateObject2_200817b1154811e887be8b38cea68555
    """
    if "_templateObject" not in code:
        return code
    unique_id = make_id().replace("-", "")
    return _TEMPLATE_OBJECT_RE.sub(rf"\1_{unique_id}", code)


def _with_template_rename(optimizer: Optimizer) -> Optimizer:
    def _run(text: str, options: Any) -> str:
        return rename_template_objects(optimizer(text, options))

    return _run


def js_compile_transform(protected: list[str] | None = None) -> OptimizeTransform:
    return OptimizeTransform(
        "babel-compile",
        _with_template_rename(js_transpile),
        JS_COMPILE_OPTIONS,
        protected=protected,
    )


def js_minify_transform(protected: list[str] | None = None) -> OptimizeTransform:
    return OptimizeTransform(
        "babel-minify",
        _with_template_rename(js_minify),
        JS_MINIFY_OPTIONS,
        protected=protected,
    )
