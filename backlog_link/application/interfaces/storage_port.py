"""
Storage Port - Abstract interface for job property persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from backlog_link.domain.value_objects import ProjectLinkConfig


class StoragePort(ABC):
    """Abstract interface for job property storage."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize storage connection."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close storage connection."""
        pass

    @abstractmethod
    async def save_project_link(self, job_name: str, config: ProjectLinkConfig) -> None:
        """Save the project link of a job, replacing any previous one."""
        pass

    @abstractmethod
    async def get_project_link(self, job_name: str) -> Optional[ProjectLinkConfig]:
        """Get the stored project link of a job."""
        pass

    @abstractmethod
    async def delete_project_link(self, job_name: str) -> None:
        """Delete the project link of a job."""
        pass

    @abstractmethod
    async def delete_job(self, job_name: str) -> None:
        """Delete every stored property of a job."""
        pass
