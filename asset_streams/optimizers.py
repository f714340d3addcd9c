"""Adapters around third-party minifiers and the Babel transpiler.

Every adapter has the ``(text, options) -> text`` shape the optimize workers
call, and raises whatever the wrapped library raises on bad input.
"""

from __future__ import annotations

import re
import uuid
from functools import lru_cache
from typing import Any

import dukpy
import minify_html
import rcssmin
import rjsmin
from pydantic import BaseModel, ConfigDict


class HtmlMinifyOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    collapse_whitespace: bool = True
    remove_comments: bool = True


class CssOptimizeOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    strip_whitespace: bool = False


class JsMinifyOptions(BaseModel):
    """rjsmin settings.

    rjsmin only strips comments and whitespace: comparisons are never
    rewritten and unknown syntax (object rest/spread, dynamic import) is
    tokenized without being parsed.
    """

    model_config = ConfigDict(frozen=True)

    keep_bang_comments: bool = False


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


def html_minify(text: str, options: HtmlMinifyOptions) -> str:
    """Minify an HTML document with minify-html.

    minify-html always collapses whitespace; ``collapse_whitespace=False``
    leaves the document untouched.
    """
    if not options.collapse_whitespace:
        return text
    return minify_html.minify(
        text,
        keep_comments=not options.remove_comments,
        minify_css=False,
        minify_js=False,
    )


# ---------------------------------------------------------------------------
# CSS
# ---------------------------------------------------------------------------

_STYLE_BLOCK_RE = re.compile(r"(<style\b[^>]*>)(.*?)(</style\s*>)", re.DOTALL | re.IGNORECASE)


def css_minify(text: str, options: CssOptimizeOptions) -> str:
    return rcssmin.cssmin(text)


def css_minify_embedded(html: str, options: CssOptimizeOptions) -> str:
    """Minify the body of every ``<style>`` element; the rest of the HTML is untouched."""

    def _repl(m: re.Match) -> str:
        return m.group(1) + rcssmin.cssmin(m.group(2)) + m.group(3)

    return _STYLE_BLOCK_RE.sub(_repl, html)


# ---------------------------------------------------------------------------
# JavaScript
# ---------------------------------------------------------------------------


def js_transpile(text: str, options: dict[str, Any]) -> str:
    """Transpile with Babel (via dukpy). ``options`` are Babel transform options."""
    result = dukpy.babel_compile(text, **options)
    return result["code"]


def js_minify(text: str, options: JsMinifyOptions) -> str:
    return rjsmin.jsmin(text, keep_bang_comments=options.keep_bang_comments)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def random_id() -> str:
    """Fresh identifier-safe token (hex, no hyphens)."""
    return uuid.uuid4().hex


def glob_match(path: str, pattern: str) -> bool:
    """Shell-style match of a whole ``/``-separated path.

    ``**`` crosses directory separators, ``*`` and ``?`` do not.
    """
    return _compile_glob(pattern).fullmatch(path) is not None


@lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> re.Pattern:
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == n:
            out.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif c == "*":
            out.append("[^/]*")
            i += 1
        elif c == "?":
            out.append("[^/]")
            i += 1
        elif c == "[":
            end = pattern.find("]", i + 2)
            if end == -1:
                out.append(re.escape(c))
                i += 1
                continue
            body = pattern[i + 1:end]
            if body.startswith("!"):
                body = "^" + body[1:]
            out.append("[" + body.replace("\\", "\\\\") + "]")
            i = end + 1
        else:
            out.append(re.escape(c))
            i += 1
    return re.compile("".join(out))
