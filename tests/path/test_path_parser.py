"""Tests for parse_path.

Covers:
- Root paths ("" and ".") yield no steps
- Plain dotted keys, including numeric-looking tokens (kept as KeyStep)
- Bracket selectors at the end, mid-path, and as bare tokens
- Whitespace and empty-token handling
- PathSyntaxError for malformed brackets, carrying the offending text
- ParsedPath immutability and helper properties
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from yays.errors import PathSyntaxError
from yays.path.parser import parse_path
from yays.path.steps import IndexStep, KeyStep, ParsedPath, WildcardStep


class TestRootPaths:
    @pytest.mark.parametrize("path", ["", ".", "  ", " . "])
    def test_root_paths_have_no_steps(self, path: str) -> None:
        parsed = parse_path(path)
        assert parsed.steps == ()
        assert parsed.is_root

    def test_source_is_kept_verbatim(self) -> None:
        assert parse_path(" . ").source == " . "


class TestKeySteps:
    def test_single_key(self) -> None:
        assert parse_path("metadata").steps == (KeyStep("metadata"),)

    def test_dotted_keys(self) -> None:
        assert parse_path("spec.template.spec").steps == (
            KeyStep("spec"),
            KeyStep("template"),
            KeyStep("spec"),
        )

    def test_numeric_token_stays_a_key_step(self) -> None:
        """Digits are not special to the parser; the resolver decides."""
        assert parse_path("servers.0.roles").steps == (
            KeyStep("servers"),
            KeyStep("0"),
            KeyStep("roles"),
        )

    def test_leading_trailing_and_doubled_dots_are_skipped(self) -> None:
        assert parse_path(".a..b.").steps == (KeyStep("a"), KeyStep("b"))

    def test_tokens_are_trimmed(self) -> None:
        assert parse_path(" a . b ").steps == (KeyStep("a"), KeyStep("b"))


class TestBracketSteps:
    def test_trailing_wildcard(self) -> None:
        assert parse_path("items[*]").steps == (KeyStep("items"), WildcardStep())

    def test_trailing_index(self) -> None:
        assert parse_path("items[3]").steps == (KeyStep("items"), IndexStep(3))

    def test_mid_path_selectors(self) -> None:
        assert parse_path("servers[0].roles").steps == (
            KeyStep("servers"),
            IndexStep(0),
            KeyStep("roles"),
        )
        assert parse_path("items[*].meta").steps == (
            KeyStep("items"),
            WildcardStep(),
            KeyStep("meta"),
        )

    def test_bare_bracket_applies_to_current_node(self) -> None:
        assert parse_path(".[*]").steps == (WildcardStep(),)
        assert parse_path(".[2]").steps == (IndexStep(2),)
        assert parse_path("a.[1].b").steps == (
            KeyStep("a"),
            IndexStep(1),
            KeyStep("b"),
        )

    def test_whitespace_inside_brackets_is_ignored(self) -> None:
        assert parse_path("items[ * ]").steps == (KeyStep("items"), WildcardStep())
        assert parse_path("items[ 7 ]").steps == (KeyStep("items"), IndexStep(7))

    def test_multi_digit_index(self) -> None:
        assert parse_path("[10]").steps == (IndexStep(10),)


class TestPathSyntaxErrors:
    @pytest.mark.parametrize(
        ("path", "offending"),
        [
            ("items[x]", "x"),
            ("items[-1]", "-1"),
            ("items[]", ""),
            ("items[1.5", "items[1"),
            ("[**]", "**"),
        ],
    )
    def test_invalid_selector_names_offending_text(
        self, path: str, offending: str
    ) -> None:
        with pytest.raises(PathSyntaxError) as excinfo:
            parse_path(path)
        assert excinfo.value.text == offending
        assert excinfo.value.path == path

    @pytest.mark.parametrize(
        "path", ["items[0", "items]", "a[0][1]", "a[0]b", "[0", "a.b]"]
    )
    def test_unmatched_or_extra_brackets(self, path: str) -> None:
        with pytest.raises(PathSyntaxError):
            parse_path(path)

    def test_message_contains_path(self) -> None:
        with pytest.raises(PathSyntaxError, match=r"invalid path 'spec\[abc\]'"):
            parse_path("spec[abc]")


class TestParsedPath:
    def test_has_wildcard(self) -> None:
        assert parse_path("a[*].b").has_wildcard
        assert not parse_path("a[0].b").has_wildcard
        assert not parse_path(".").has_wildcard

    def test_is_frozen(self) -> None:
        parsed = parse_path("a")
        with pytest.raises(FrozenInstanceError):
            parsed.steps = ()  # type: ignore[misc]

    def test_steps_are_a_tuple(self) -> None:
        assert isinstance(parse_path("a.b[0]").steps, tuple)

    def test_equal_paths_compare_equal(self) -> None:
        assert parse_path("a[0]") == ParsedPath("a[0]", (KeyStep("a"), IndexStep(0)))

    def test_step_str(self) -> None:
        parsed = parse_path("a[0].b[*]")
        assert [str(step) for step in parsed.steps] == ["a", "[0]", "b", "[*]"]
