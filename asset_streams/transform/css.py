"""CSS minify workers, for stylesheets and for <style> blocks inside HTML."""

from __future__ import annotations

from asset_streams.optimizers import CssOptimizeOptions, css_minify, css_minify_embedded

from .optimize import OptimizeTransform


# rcssmin takes no options, so strip_whitespace gates whether it runs at all.
def css_minify_transform(
    options: CssOptimizeOptions, protected: list[str] | None = None
) -> OptimizeTransform:
    return OptimizeTransform(
        "css-minify",
        css_minify,
        options,
        protected=protected,
        enabled=options.strip_whitespace,
    )


def inline_css_minify_transform(
    options: CssOptimizeOptions, protected: list[str] | None = None
) -> OptimizeTransform:
    return OptimizeTransform(
        "css-minify-inline",
        css_minify_embedded,
        options,
        protected=protected,
        enabled=options.strip_whitespace,
    )
