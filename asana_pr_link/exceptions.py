"""Custom exception hierarchy for asana-pr-link.

Every failure the link run can produce on its own is a subclass of
``AsanaPrLinkError`` so the CLI boundary can report it with a single
except clause. Transport and authorization errors raised by httpx or
PyGithub are deliberately left unwrapped and propagate as-is.

Exception Hierarchy:
    AsanaPrLinkError (base)
    ├── ConfigurationError
    ├── MalformedReferenceError
    ├── MissingFieldsError
    ├── TaskNotFoundError
    └── MissingPermalinkError

Example Usage:
    >>> from asana_pr_link.exceptions import MalformedReferenceError
    >>> try:
    ...     gid = extract_task_gid(ref)
    ... except MalformedReferenceError as e:
    ...     print(e.reference)
"""

from collections.abc import Sequence


class AsanaPrLinkError(Exception):
    """Base exception for all asana-pr-link errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(AsanaPrLinkError):
    """Configuration-related errors.

    Raised when secrets are missing or blank, or when the event payload
    file cannot be read or parsed.

    Examples:
        - ASANA_TOKEN not set
        - GITHUB_EVENT_PATH points to a missing file
        - Event payload is not a JSON object
    """

    pass


class MalformedReferenceError(AsanaPrLinkError):
    """A branch ref or repository name does not have the expected shape.

    Attributes:
        message: Human-readable error description
        reference: The offending ref or repository name
    """

    def __init__(self, message: str, reference: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            reference: The string that could not be parsed
        """
        self.reference = reference
        super().__init__(message)


class MissingFieldsError(AsanaPrLinkError):
    """One or more required trigger fields are absent.

    All missing names are reported at once, in the order they were
    checked.

    Attributes:
        fields: Names of the missing fields
    """

    def __init__(self, fields: Sequence[str]) -> None:
        """Initialize exception.

        Args:
            fields: Names of the fields whose values were falsy
        """
        self.fields = list(fields)
        super().__init__(f"Cannot find the following properties: {', '.join(self.fields)}")


class TaskNotFoundError(AsanaPrLinkError):
    """Asana has no task for the derived gid.

    Attributes:
        gid: Task identifier that was looked up
    """

    def __init__(self, gid: str) -> None:
        self.gid = gid
        super().__init__(f"Task not found with gid: {gid}")


class MissingPermalinkError(AsanaPrLinkError):
    """The task exists but carries no permalink URL.

    Attributes:
        gid: Task identifier that was looked up
    """

    def __init__(self, gid: str) -> None:
        self.gid = gid
        super().__init__(f"Task URL not found for gid: {gid}")
