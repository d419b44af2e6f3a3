"""Tests for modules.dependencies.errors."""

from pathlib import Path
from unittest.mock import patch

import pytest

from infrastructure.i18n import LanguageTag, load
from modules.aur import AurError
from modules.dependencies import DependencyError, DependencyErrorKind
from modules.git import GitError

HEADER = "There were multiple errors during dependency resolution:"


@pytest.mark.unit
class TestDependencyErrorLocalise:
    """Tests for DependencyError.localise()."""

    def test_poisoned_mutex(self, english):
        assert DependencyError.poisoned_mutex().localise(english) == (
            "An internal lock was poisoned."
        )

    def test_pool_hides_cause(self, english):
        message = DependencyError.pool(TimeoutError("pool exhausted")).localise(english)
        assert message == "Failed to obtain a database connection."

    def test_srcinfo(self, english):
        path = Path("/tmp/foo/.SRCINFO")
        error = DependencyError.srcinfo(path, ValueError("line 3"))
        assert error.localise(english) == f"Failed to parse the .SRCINFO file {path}."

    def test_git_delegates_unchanged(self, english):
        git = GitError.pull(Path("/tmp/foo"))
        assert DependencyError.from_git(git).localise(english) == git.localise(english)

    def test_faur_delegates_unchanged(self, english):
        faur = AurError.too_many_faur_results("foo")
        assert DependencyError.faur(faur).localise(english) == faur.localise(english)

    def test_doesnt_exist(self, english):
        assert DependencyError.doesnt_exist("foo").localise(english) == (
            "The package foo does not exist."
        )

    def test_doesnt_exist_with_parent(self, english):
        """Both ids appear in their placeholder positions."""
        message = DependencyError.doesnt_exist_with_parent("foo", "bar").localise(english)
        assert message == "The package foo, required by bar, does not exist."
        assert message.index("foo") < message.index("bar")

    def test_doesnt_exist_with_parent_translated(self):
        """Translations may reorder the placeholders."""
        japanese = load(LanguageTag("ja", "JP"))
        message = DependencyError.doesnt_exist_with_parent("foo", "bar").localise(japanese)
        assert "foo" in message
        assert "bar" in message
        assert message.index("bar") < message.index("foo")

    def test_malformed_graph(self, english):
        assert DependencyError.malformed_graph().localise(english) == (
            "The dependency graph is malformed."
        )

    def test_cyclic_dep(self, english):
        assert "foo" in DependencyError.cyclic_dep("foo").localise(english)


@pytest.mark.unit
class TestResolutions:
    """Tests for the aggregate RESOLUTIONS variant."""

    def test_header_then_bullets_in_order(self, english):
        errors = [
            DependencyError.doesnt_exist("foo"),
            DependencyError.cyclic_dep("bar"),
            DependencyError.doesnt_exist("foo"),
        ]
        lines = DependencyError.resolutions(errors).localise(english).split("\n")

        assert len(lines) == len(errors) + 1
        assert lines[0] == HEADER
        for line, error in zip(lines[1:], errors):
            assert line == f" - {error.localise(english)}"
        assert all(lines)

    def test_no_trailing_newline(self, english):
        message = DependencyError.resolutions(
            [DependencyError.malformed_graph()]
        ).localise(english)
        assert not message.endswith("\n")
        assert message == f"{HEADER}\n - The dependency graph is malformed."

    def test_empty_aggregate_is_header_only(self, english):
        assert DependencyError.resolutions([]).localise(english) == HEADER

    def test_nested_aggregate_recurses(self, english):
        inner = DependencyError.resolutions([DependencyError.doesnt_exist("foo")])
        outer = DependencyError.resolutions([inner, DependencyError.cyclic_dep("bar")])
        lines = outer.localise(english).split("\n")
        assert lines == [
            HEADER,
            f" - {HEADER}",
            " - The package foo does not exist.",
            " - A dependency cycle was detected involving bar.",
        ]

    def test_errors_stored_as_tuple(self):
        error = DependencyError.resolutions([DependencyError.malformed_graph()])
        assert isinstance(error.errors, tuple)
        assert error.kind is DependencyErrorKind.RESOLUTIONS


@pytest.mark.unit
class TestDependencyErrorDetail:
    """Tests for the technical side of DependencyError."""

    def test_str(self):
        assert str(DependencyError.doesnt_exist_with_parent("foo", "bar")) == (
            "doesnt_exist_with_parent: foo, bar"
        )
        assert str(DependencyError.malformed_graph()) == "malformed_graph"
        assert str(DependencyError.resolutions([])) == "0 dependency resolution errors"

    def test_nested_walks_every_sub_error(self):
        error = DependencyError.resolutions(
            [
                DependencyError.pool(TimeoutError("pool exhausted")),
                DependencyError.from_git(GitError.io(OSError(5, "Input/output error"))),
            ]
        )
        with patch("modules.dependencies.errors.logger") as dep_logger, patch(
            "modules.git.errors.logger"
        ) as git_logger:
            error.nested()
        dep_logger.error.assert_called_once()
        git_logger.error.assert_called_once()


@pytest.mark.unit
class TestDependencyErrorConstruction:
    """Tests for DependencyError payload checks."""

    @pytest.mark.parametrize(
        "kind, kwargs, missing",
        [
            (DependencyErrorKind.SRCINFO, {}, "path"),
            (DependencyErrorKind.GIT, {}, "inner"),
            (DependencyErrorKind.FAUR, {}, "inner"),
            (DependencyErrorKind.DOESNT_EXIST, {}, "package"),
            (DependencyErrorKind.CYCLIC_DEP, {}, "package"),
            (DependencyErrorKind.DOESNT_EXIST_WITH_PARENT, {"package": "foo"}, "parent"),
            (DependencyErrorKind.DOESNT_EXIST_WITH_PARENT, {"parent": "bar"}, "package"),
        ],
    )
    def test_missing_payload_rejected(self, kind, kwargs, missing):
        with pytest.raises(ValueError, match=f"requires {missing}"):
            DependencyError(kind, **kwargs)

    def test_empty_aggregate_allowed(self, english):
        """An aggregate of nothing still renders its header."""
        error = DependencyError(DependencyErrorKind.RESOLUTIONS)
        assert error.localise(english) == (
            "There were multiple errors during dependency resolution:"
        )
