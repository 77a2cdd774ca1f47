"""
Tests for rule composition.

These tests validate ordering, source-text exclusion and configuration-time
failure for malformed patterns.
"""

import re

import pytest

from honeypot.checks.signatures import (
    Anchoring,
    Signature,
    SignatureCompilationError,
    builtin_signatures,
    compose,
    decide,
    pattern_source,
)


ADMIN_PANEL = r"^/admin(\.php)?$"


class TestCompose:
    """Test composition of built-ins, additions and exclusions."""

    def setup_method(self):
        """Set up a small built-in list."""
        self.builtins = (
            Signature(pattern=r"^/admin$", anchoring=Anchoring.EXACT),
            Signature(pattern=r"^/blog$", anchoring=Anchoring.EXACT),
            Signature(pattern=r"/\.git", anchoring=Anchoring.ANYWHERE),
        )

    def test_no_changes_keeps_builtins(self):
        assert compose(self.builtins) == self.builtins

    def test_result_is_immutable_tuple(self):
        assert isinstance(compose(self.builtins, [r"^/secret"]), tuple)

    def test_additions_are_appended_in_order(self):
        """Test that caller rules are evaluated after every built-in."""
        rules = compose(self.builtins, additions=[r"^/secret", r"^/internal$"])

        assert [r.pattern for r in rules] == [
            r"^/admin$",
            r"^/blog$",
            r"/\.git",
            r"^/secret",
            r"^/internal$",
        ]

    def test_exclusion_removes_by_source_text(self):
        rules = compose(self.builtins, exclusions=[r"^/blog$"])

        assert [r.pattern for r in rules] == [r"^/admin$", r"/\.git"]

    def test_exclusion_preserves_builtin_order(self):
        rules = compose(self.builtins, exclusions=[r"^/admin$"])

        assert [r.pattern for r in rules] == [r"^/blog$", r"/\.git"]

    def test_equivalent_but_different_text_not_excluded(self):
        """Test that exclusion is textual, not semantic."""
        rules = compose(self.builtins, exclusions=[r"^/(?:blog)$", r"^\/blog$"])

        assert rules == self.builtins

    def test_unmatched_exclusion_is_silent(self):
        assert compose(self.builtins, exclusions=[r"^/nothing-here$"]) == self.builtins

    def test_exclusions_do_not_remove_additions(self):
        rules = compose(self.builtins, additions=[r"^/secret"], exclusions=[r"^/secret"])

        assert rules[-1].pattern == r"^/secret"

    def test_exclusion_accepts_compiled_and_signature(self):
        rules = compose(
            self.builtins,
            exclusions=[re.compile(r"^/admin$"), self.builtins[1]],
        )

        assert [r.pattern for r in rules] == [r"/\.git"]

    def test_composition_is_deterministic(self):
        first = compose(self.builtins, [r"^/secret"], [r"^/blog$"])
        second = compose(self.builtins, [r"^/secret"], [r"^/blog$"])

        assert first == second

    def test_builtins_accept_any_iterable(self):
        rules = compose(iter(self.builtins), exclusions=[r"^/blog$"])

        assert len(rules) == 2

    def test_malformed_addition_fails(self):
        with pytest.raises(SignatureCompilationError):
            compose(self.builtins, additions=[r"^/broken("])

    def test_malformed_exclusion_fails(self):
        with pytest.raises(SignatureCompilationError):
            compose(self.builtins, exclusions=[r"[broken"])


class TestBuiltinExclusion:
    """Test excluding real built-in signatures."""

    def test_excluding_admin_panel_allows_admin(self):
        rules = compose(builtin_signatures(), exclusions=[ADMIN_PANEL])

        assert decide("/admin", rules).allowed
        assert decide("/phpmyadmin", rules).blocked

    def test_addition_blocks_new_path(self):
        assert decide("/secret", compose(builtin_signatures())).allowed

        rules = compose(builtin_signatures(), additions=[r"^/secret"])
        assert decide("/secret", rules).blocked

    def test_builtins_are_not_mutated(self):
        before = builtin_signatures()
        compose(before, additions=[r"^/secret"], exclusions=[ADMIN_PANEL])

        assert builtin_signatures() == before
        assert any(sig.pattern == ADMIN_PANEL for sig in builtin_signatures())


class TestPatternSource:
    """Test source-text extraction."""

    def test_sources(self):
        sig = Signature(pattern=r"^/bk$", anchoring=Anchoring.EXACT)

        assert pattern_source(r"^/bk$") == r"^/bk$"
        assert pattern_source(re.compile(r"^/bk$")) == r"^/bk$"
        assert pattern_source(sig) == r"^/bk$"
