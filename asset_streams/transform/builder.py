"""Builds the ordered list of optimize stages from OptimizeOptions."""

from __future__ import annotations

from asset_streams.config.models import OptimizeOptions, StageOption, exclusions, is_enabled
from asset_streams.optimizers import CssOptimizeOptions, HtmlMinifyOptions

from .css import css_minify_transform, inline_css_minify_transform
from .html import html_minify_transform
from .js import js_compile_transform, js_minify_transform
from .matcher import matches_ext_and_not_excluded
from .optimize import OptimizeTransform
from .pipeline import GatedStage


def _gate(extension: str, option: StageOption, transform: OptimizeTransform) -> GatedStage:
    return GatedStage(
        matches_ext_and_not_excluded(extension, option),
        transform,
        exclude=exclusions(option),
    )


def get_optimize_stages(options: OptimizeOptions | None = None) -> list[GatedStage]:
    """Return the optimize stages to run, in order.

    Compile runs first so every minifier sees compiled code, and JS minify runs
    last. Disabled stages are not constructed at all.
    """
    options = options or OptimizeOptions()
    protected = list(options.protected)
    stages: list[GatedStage] = []

    if options.js and is_enabled(options.js.compile):
        stages.append(_gate(".js", options.js.compile, js_compile_transform(protected)))

    if options.html and is_enabled(options.html.minify):
        html_options = HtmlMinifyOptions(collapse_whitespace=True, remove_comments=True)
        stages.append(
            _gate(".html", options.html.minify, html_minify_transform(html_options, protected))
        )

    if options.css and is_enabled(options.css.minify):
        css_options = CssOptimizeOptions(strip_whitespace=True)
        stages.append(
            _gate(".css", options.css.minify, css_minify_transform(css_options, protected))
        )
        # TODO: drop once <style> blocks are split out of HTML into their own files
        stages.append(
            _gate(".html", options.css.minify, inline_css_minify_transform(css_options, protected))
        )

    if options.js and is_enabled(options.js.minify):
        stages.append(_gate(".js", options.js.minify, js_minify_transform(protected)))

    return stages
