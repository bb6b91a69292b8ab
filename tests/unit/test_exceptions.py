"""Tests for asana_pr_link.exceptions module."""

import pytest

from asana_pr_link.exceptions import (
    AsanaPrLinkError,
    ConfigurationError,
    MalformedReferenceError,
    MissingFieldsError,
    MissingPermalinkError,
    TaskNotFoundError,
)


class TestAsanaPrLinkError:
    """Test base AsanaPrLinkError class."""

    def test_init_with_message(self):
        error = AsanaPrLinkError("Test error message")

        assert error.message == "Test error message"
        assert str(error) == "Test error message"

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("bad config"),
            MalformedReferenceError("bad ref", reference="main"),
            MissingFieldsError(["pr ref"]),
            TaskNotFoundError("1"),
            MissingPermalinkError("1"),
        ],
    )
    def test_subclasses_caught_as_base(self, error):
        """Every link failure can be caught with the base class."""
        with pytest.raises(AsanaPrLinkError):
            raise error


class TestMalformedReferenceError:
    def test_keeps_reference(self):
        error = MalformedReferenceError("Could not find slash in ref: main", reference="main")

        assert error.reference == "main"
        assert error.message == "Could not find slash in ref: main"

    def test_reference_optional(self):
        assert MalformedReferenceError("oops").reference is None


class TestMissingFieldsError:
    def test_lists_all_fields_in_order(self):
        error = MissingFieldsError(["pr url", "repo name"])

        assert error.fields == ["pr url", "repo name"]
        assert str(error) == "Cannot find the following properties: pr url, repo name"


class TestTaskErrors:
    def test_task_not_found_message(self):
        error = TaskNotFoundError("1204")

        assert error.gid == "1204"
        assert error.message == "Task not found with gid: 1204"

    def test_missing_permalink_message(self):
        error = MissingPermalinkError("1204")

        assert error.gid == "1204"
        assert error.message == "Task URL not found for gid: 1204"
