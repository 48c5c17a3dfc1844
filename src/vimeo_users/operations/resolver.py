"""
Path resolution for user-centric resources.

Most endpoints exist twice: once under the ``me`` alias for the authenticated
caller and once under ``users/{id}`` for an explicit user.
"""

from dataclasses import dataclass
from urllib.parse import quote


class Subject:
    """Who a request is about: the caller (:data:`ME`) or an explicit user."""

    is_self = False


@dataclass(frozen=True)
class Me(Subject):
    is_self = True


@dataclass(frozen=True)
class Identified(Subject):
    id: str

    def __post_init__(self):
        if not self.id:
            raise ValueError("An identified subject needs a non-empty id")
        if is_dot_segment(self.id):
            raise ValueError(f"'{self.id}' can't be used as an id")


ME = Me()

SubjectLike = Subject | str | int | None


def as_subject(value: SubjectLike) -> Subject:
    """
    Coerce caller input to a :class:`Subject`.

    ``None`` and the empty string address the authenticated caller.
    """
    if isinstance(value, Subject):
        return value
    if value is None or value == "":
        return ME
    return Identified(str(value))


def is_dot_segment(value: str) -> bool:
    # "." and ".." are collapsed by URL joining, percent-encoded or not
    return value in (".", "..")


def escape(value) -> str:
    value = str(value)
    if is_dot_segment(value):
        raise ValueError(f"'{value}' can't be used as a path segment")
    return quote(value, safe="")



def resolve(
    subject: SubjectLike, self_template: str, explicit_template: str, **params
) -> str:
    """
    Resolve the relative path for a subject.

    Args:
        subject: The subject, or anything accepted by :func:`as_subject`
        self_template: Path used for the authenticated caller
        explicit_template: Path used for an explicit id, with an ``{id}`` placeholder
        **params: Extra placeholder values, percent-encoded like the id

    Returns:
        Relative path without leading slash

    Examples:
        >>> resolve("", "me/followers", "users/{id}/followers")
        'me/followers'
        >>> resolve("42", "me/followers", "users/{id}/followers")
        'users/42/followers'
    """
    subject = as_subject(subject)
    escaped = {key: escape(value) for key, value in params.items()}
    if subject.is_self:
        return self_template.format(**escaped)
    return explicit_template.format(id=escape(subject.id), **escaped)


class PathResolver:
    """
    Resolver building ``me/...`` and ``<resource>/{id}/...`` paths from segments.
    """

    def __init__(self, resource: str = "users", alias: str = "me"):
        self.resource = resource
        self.alias = alias

    def path(
        self, subject: SubjectLike, segment: str = "", related: str | None = None
    ) -> str:
        """
        Build the path for ``subject``, optionally below ``segment`` and a related id.

        Examples:
            >>> resolver = PathResolver()
            >>> resolver.path(ME)
            'me'
            >>> resolver.path("42", "categories", "tech")
            'users/42/categories/tech'
        """
        suffix = ""
        if segment:
            suffix = f"/{segment}"
        if related is not None:
            if related == "":
                raise ValueError(f"A related id is required below '{segment}'")
            suffix += "/{related}"

        params = {"related": related} if related is not None else {}
        return resolve(
            subject,
            f"{self.alias}{suffix}",
            f"{self.resource}/{{id}}{suffix}",
            **params,
        )
