"""Tests for stage matching: extension suffix, exclusion globs, directory entries."""

import pytest

from asset_streams.config.models import ExcludeOption
from asset_streams.models import AssetFile
from asset_streams.optimizers import glob_match
from asset_streams.transform.matcher import matches, matches_ext_and_not_excluded

from conftest import make_file


# ===========================================================================
# glob_match
# ===========================================================================


class TestGlobMatch:
    @pytest.mark.parametrize("path", ["vendor/foo.js", "vendor/sub/bar.js"])
    def test_double_star_crosses_directories(self, path):
        assert glob_match(path, "vendor/**")

    def test_double_star_does_not_match_sibling_prefix(self):
        assert not glob_match("src/vendor-like.js", "vendor/**")

    def test_single_star_stays_in_one_directory(self):
        assert glob_match("app.min.js", "*.min.js")
        assert not glob_match("lib/app.min.js", "*.min.js")

    def test_leading_double_star_matches_any_depth(self):
        assert glob_match("lib/app.min.js", "**/*.min.js")
        assert glob_match("app.min.js", "**/*.min.js")

    def test_question_mark(self):
        assert glob_match("a1.js", "a?.js")
        assert not glob_match("a12.js", "a?.js")
        assert not glob_match("a/.js", "a?.js")

    def test_character_class(self):
        assert glob_match("v1.js", "v[0-9].js")
        assert not glob_match("vx.js", "v[0-9].js")
        assert glob_match("vx.js", "v[!0-9].js")

    def test_full_match_required(self):
        assert not glob_match("src/app.js", "src")
        assert not glob_match("src/app.js.map", "src/*.js")

    def test_case_sensitive(self):
        assert not glob_match("Vendor/foo.js", "vendor/**")

    def test_regex_characters_are_literal(self):
        assert glob_match("a+b(1).js", "a+b(1).js")
        assert not glob_match("aab(1).js", "a+b(1).js")

    def test_double_star_in_middle(self):
        assert glob_match("a/b", "a/**/b")
        assert glob_match("a/x/y/b", "a/**/b")
        assert not glob_match("a/x/c", "a/**/b")


# ===========================================================================
# matches
# ===========================================================================


class TestMatches:
    def test_extension_match(self):
        assert matches(make_file("app.js"), ".js", True)

    def test_extension_is_exact_suffix(self):
        assert not matches(make_file("app.jsx"), ".js", True)
        assert not matches(make_file("app.JS"), ".js", True)

    def test_no_path_never_matches(self):
        assert not matches(AssetFile(path="", contents=b"x"), ".js", True)

    def test_boolean_option_excludes_nothing(self):
        assert matches(make_file("vendor/foo.js"), ".js", True)

    def test_empty_exclude_list_excludes_nothing(self):
        assert matches(make_file("vendor/foo.js"), ".js", ExcludeOption(exclude=[]))

    def test_vendor_exclusion(self):
        option = ExcludeOption(exclude=["vendor/**"])
        assert not matches(make_file("vendor/foo.js"), ".js", option)
        assert not matches(make_file("vendor/sub/bar.js"), ".js", option)
        assert matches(make_file("src/vendor-like.js"), ".js", option)

    def test_any_pattern_excludes(self):
        option = ExcludeOption(exclude=["a.js", "lib/**"])
        assert not matches(make_file("a.js"), ".js", option)
        assert not matches(make_file("lib/b.js"), ".js", option)
        assert matches(make_file("c.js"), ".js", option)

    def test_relative_path_is_used_not_absolute(self):
        option = ExcludeOption(exclude=["build/**"])
        # base is /build/src, so the relative path does not start with build/
        assert matches(make_file("app.js"), ".js", option)

    def test_windows_separators_are_normalized(self):
        file = AssetFile(path="vendor\\foo.js", contents=b"")
        assert not matches(file, ".js", ExcludeOption(exclude=["vendor/**"]))


class TestMatchesExtAndNotExcluded:
    def test_returns_predicate(self):
        predicate = matches_ext_and_not_excluded(".css", ExcludeOption(exclude=["old/**"]))
        assert predicate(make_file("new/site.css"))
        assert not predicate(make_file("old/site.css"))
        assert not predicate(make_file("new/site.js"))
