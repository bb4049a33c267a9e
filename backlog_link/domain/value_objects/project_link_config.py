"""
ProjectLinkConfig Value Object - Per-job link to a Backlog space/project.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .link_action import LinkAction
from .secret import Secret


PROJECTS_SEGMENT = "/projects/"


def normalize_url(url: Optional[str]) -> Optional[str]:
    """
    Normalize a Backlog URL.

    Empty input becomes ``None``. A URL pointing at a project, or already
    ending with a slash, is kept as-is; anything else gets a trailing slash.
    """
    if not url:
        return None
    if PROJECTS_SEGMENT in url:
        return url
    if url.endswith("/"):
        return url
    return url + "/"


@dataclass(frozen=True)
class ProjectLinkConfig:
    """
    Immutable value object attached to a job.

    Built once per form submission; a new submission replaces the instance
    on the job instead of mutating it.

    Attributes:
        url: Normalized Backlog URL, either a space root or a project URL
        user_id: Backlog login id
        password: Backlog password
        api_key: Backlog API key
    """

    url: Optional[str] = None
    user_id: Optional[str] = None
    password: Secret = field(default_factory=Secret)
    api_key: Secret = field(default_factory=Secret)

    def __post_init__(self) -> None:
        """Normalize the URL and wrap plain-string secrets."""
        object.__setattr__(self, "url", normalize_url(self.url))
        object.__setattr__(self, "password", Secret.from_string(self.password))
        object.__setattr__(self, "api_key", Secret.from_string(self.api_key))

    @property
    def space_url(self) -> Optional[str]:
        """Root URL of the Backlog space, keeping the trailing slash."""
        if self.url is None:
            return None
        index = self.url.find(PROJECTS_SEGMENT)
        if index < 0:
            return self.url
        return self.url[: index + 1]

    @property
    def project(self) -> Optional[str]:
        """Project key following ``/projects/``; empty string if nothing follows."""
        if self.url is None:
            return None
        index = self.url.find(PROJECTS_SEGMENT)
        if index < 0:
            return None
        return self.url[index + len(PROJECTS_SEGMENT):]

    @property
    def is_configured(self) -> bool:
        """Check if a Backlog URL is set."""
        return self.url is not None

    def get_job_action(self, job: Any) -> LinkAction:
        """Link action shown on the page of the job owning this property."""
        return LinkAction(self)
