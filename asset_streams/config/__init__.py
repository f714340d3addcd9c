from .loader import load_config
from .models import (
    DEFAULT_PROTECTED_PATHS,
    AssetStreamsConfig,
    CssOptions,
    ExcludeOption,
    HtmlOptions,
    JsOptions,
    OptimizeOptions,
    StageOption,
    exclusions,
    is_enabled,
)

__all__ = [
    "DEFAULT_PROTECTED_PATHS",
    "AssetStreamsConfig",
    "CssOptions",
    "ExcludeOption",
    "HtmlOptions",
    "JsOptions",
    "OptimizeOptions",
    "StageOption",
    "exclusions",
    "is_enabled",
    "load_config",
]
