"""
LinkAction Value Object - Job page link to the Backlog project.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .project_link_config import ProjectLinkConfig


@dataclass(frozen=True)
class LinkAction:
    """
    UI affordance linking a job to its Backlog space or project.

    Tolerates a missing or empty configuration: the target and the icon are
    then ``None`` and the host renders nothing.
    """

    config: Optional["ProjectLinkConfig"] = None

    DISPLAY_NAME = "Backlog"
    ICON_FILE_NAME = "/plugin/backlog/icon.png"

    @property
    def display_name(self) -> str:
        return self.DISPLAY_NAME

    @property
    def url_name(self) -> Optional[str]:
        """Target URL: the project page when a project is set, else the space."""
        if self.config is None:
            return None
        space_url = self.config.space_url
        if space_url is None:
            return None
        project = self.config.project
        if project is None:
            return space_url
        return f"{space_url}projects/{project}"

    @property
    def icon_file_name(self) -> Optional[str]:
        return self.ICON_FILE_NAME if self.is_visible else None

    @property
    def is_visible(self) -> bool:
        return self.url_name is not None
