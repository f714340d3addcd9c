"""Optimize stages for HTML, CSS and JavaScript asset streams."""

from .builder import get_optimize_stages
from .css import css_minify_transform, inline_css_minify_transform
from .html import html_minify_transform
from .js import js_compile_transform, js_minify_transform, rename_template_objects
from .matcher import matches, matches_ext_and_not_excluded
from .optimize import OptimizeFailure, OptimizeResult, OptimizeTransform
from .pipeline import GatedStage, Transform, TransformPipeline

__all__ = [
    "GatedStage",
    "OptimizeFailure",
    "OptimizeResult",
    "OptimizeTransform",
    "Transform",
    "TransformPipeline",
    "css_minify_transform",
    "get_optimize_stages",
    "html_minify_transform",
    "inline_css_minify_transform",
    "js_compile_transform",
    "js_minify_transform",
    "matches",
    "matches_ext_and_not_excluded",
    "rename_template_objects",
]
