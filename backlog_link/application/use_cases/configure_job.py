"""
Configure Job Use Case - Apply the project link form to a job.

Handles the property lifecycle:
- Binding a submitted form into a new ProjectLinkConfig
- Attaching it to the job, replacing any previous one
- Removing it when the form comes back empty
- Persisting and restoring it through the storage port
"""

import logging
from typing import Any, Optional

from backlog_link.application.descriptors import ProjectLinkDescriptor
from backlog_link.application.interfaces import StoragePort
from backlog_link.domain.entities import Job
from backlog_link.domain.value_objects import ProjectLinkConfig


logger = logging.getLogger(__name__)


class ConfigureJobUseCase:
    """
    Use case for configuring the Backlog link of a job.

    Storage is optional: without it the use case only updates the
    in-memory job.
    """

    def __init__(
        self,
        storage: Optional[StoragePort] = None,
        descriptor: Optional[ProjectLinkDescriptor] = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            storage: Job property store.
            descriptor: Descriptor binding the form; a new one by default.
        """
        self.storage = storage
        self.descriptor = descriptor or ProjectLinkDescriptor()

    async def execute(self, job: Job, form_data: dict[str, Any]) -> Optional[ProjectLinkConfig]:
        """
        Apply submitted form data to a job.

        Args:
            job: Job being configured.
            form_data: Submitted form payload; empty means "no link".

        Returns:
            The attached config, or None if the property was removed.

        Raises:
            ValueError: If the job does not accept the property.
            ValidationError: If the form fields have the wrong types.
        """
        if not self.descriptor.is_applicable(job):
            raise ValueError(
                f"{self.descriptor.display_name} link is not applicable to job {job.full_name}"
            )

        config = self.descriptor.new_instance(form_data)

        if config is None:
            job.remove_property(ProjectLinkConfig)
            if self.storage:
                await self.storage.delete_project_link(job.full_name)
            logger.info("Removed Backlog link from job %s", job.full_name)
            return None

        job.add_property(config)
        if self.storage:
            await self.storage.save_project_link(job.full_name, config)
        logger.info(
            "Configured Backlog link for job %s: space=%s project=%s",
            job.full_name,
            config.space_url,
            config.project,
        )
        return config

    async def load(self, job: Job) -> Optional[ProjectLinkConfig]:
        """Restore the stored project link onto the job."""
        if not self.storage:
            return job.get_property(ProjectLinkConfig)

        config = await self.storage.get_project_link(job.full_name)
        if config is not None:
            job.add_property(config)
            logger.debug("Loaded Backlog link for job %s", job.full_name)
        return config

    async def delete_job(self, job: Job) -> None:
        """Drop the project link when the job itself is deleted."""
        job.remove_property(ProjectLinkConfig)
        if self.storage:
            await self.storage.delete_job(job.full_name)
