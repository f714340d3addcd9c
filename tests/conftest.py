"""Shared test fixtures for asset-streams."""

import pytest

from asset_streams.config.models import (
    CssOptions,
    ExcludeOption,
    HtmlOptions,
    JsOptions,
    OptimizeOptions,
)
from asset_streams.models import AssetFile

BASE = "/build/src"


def make_file(relative: str, content: str | None = "", base: str = BASE) -> AssetFile:
    """An AssetFile under ``base``; ``content=None`` makes a directory entry."""
    return AssetFile(
        path=f"{base}/{relative}",
        base=base,
        contents=None if content is None else content.encode("utf-8"),
    )


def upper(text: str, options) -> str:
    return text.upper()


def explode(text: str, options) -> str:
    raise SyntaxError("Unexpected token (1:4)")


@pytest.fixture
def sample_files():
    """Mix of asset types, including a directory entry and an ES6 shim."""
    return [
        make_file("index.html", "<html>  <!-- hi -->  <body>x</body></html>"),
        make_file("css", None),
        make_file("css/style.css", "body {\n  color: red;\n}\n"),
        make_file("js/app.js", "const f = () => 1;\n"),
        make_file("js/app.jsx", "const g = () => <div/>;\n"),
        make_file("vendor/lib.js", "var lib = 1;\n"),
        make_file("bower_components/webcomponentsjs/webcomponents-lite.js", "class X {}\n"),
    ]


@pytest.fixture
def full_options():
    return OptimizeOptions(
        html=HtmlOptions(minify=True),
        css=CssOptions(minify=True),
        js=JsOptions(compile=True, minify=ExcludeOption(exclude=["vendor/**"])),
    )
