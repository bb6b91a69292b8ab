"""Parsing of branch refs and repository names.

Branches follow the convention ``<anything>/<task gid>``, for example
``feature/1204567890123456``. Only the segment after the last ``/`` is
used; nothing is assumed about how many segments precede it.

Example:
    >>> extract_task_gid("feature/998877")
    '998877'
    >>> split_repository_name("octo/widgets")
    RepositoryRef(owner='octo', repo='widgets')
"""

from asana_pr_link.exceptions import MalformedReferenceError
from asana_pr_link.models.domain import RepositoryRef


def extract_task_gid(ref: str) -> str:
    """Return the substring after the last ``/`` in ``ref``.

    Args:
        ref: Branch reference, e.g. ``feature/42``

    Returns:
        The final path segment of the ref (may be empty for ``feature/``)

    Raises:
        MalformedReferenceError: If ``ref`` contains no ``/``
    """
    _, separator, gid = ref.rpartition("/")
    if not separator:
        raise MalformedReferenceError(f"Could not find slash in ref: {ref}", reference=ref)
    return gid


def split_repository_name(full_name: str) -> RepositoryRef:
    """Split an ``owner/repo`` string.

    Exactly one separator with non-empty parts is accepted; nested paths
    and bare names are rejected instead of being truncated.

    Raises:
        MalformedReferenceError: If ``full_name`` is not ``owner/repo``
    """
    parts = full_name.split("/")
    if len(parts) != 2 or not all(parts):
        raise MalformedReferenceError(
            f"Repository name must be in 'owner/repo' form: {full_name}",
            reference=full_name,
        )
    return RepositoryRef(owner=parts[0], repo=parts[1])
