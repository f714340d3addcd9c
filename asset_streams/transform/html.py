from __future__ import annotations

from asset_streams.optimizers import HtmlMinifyOptions, html_minify

from .optimize import OptimizeTransform


def html_minify_transform(
    options: HtmlMinifyOptions, protected: list[str] | None = None
) -> OptimizeTransform:
    return OptimizeTransform("html-minify", html_minify, options, protected=protected)
