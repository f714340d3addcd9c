from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PROTECTED_PATHS = ["**/webcomponentsjs/**"]


class ExcludeOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    exclude: list[str] = Field(default_factory=list)


# True/False, or an enabled stage with exclusion globs
StageOption = bool | ExcludeOption


def is_enabled(option: StageOption | None) -> bool:
    if option is None:
        return False
    if isinstance(option, ExcludeOption):
        return True
    return bool(option)


def exclusions(option: StageOption | None) -> list[str]:
    """Exclusion globs for a stage option; booleans carry none."""
    if isinstance(option, ExcludeOption):
        return list(option.exclude)
    return []


class HtmlOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    minify: StageOption | None = None


class CssOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    minify: StageOption | None = None


class JsOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    compile: StageOption | None = None
    minify: StageOption | None = None


class OptimizeOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    html: HtmlOptions | None = None
    css: CssOptions | None = None
    js: JsOptions | None = None
    # Full-path globs no optimizer may touch (ES6 shims that must survive)
    protected: list[str] = Field(default_factory=lambda: list(DEFAULT_PROTECTED_PATHS))


class AssetStreamsConfig(BaseModel):
    optimize: OptimizeOptions = Field(default_factory=OptimizeOptions)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
