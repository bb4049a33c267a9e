"""
Project Link Descriptor - Form binding and validation for ProjectLinkConfig.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from backlog_link.application.extensions import ExtensionRegistry, PropertyDescriptor
from backlog_link.domain import messages
from backlog_link.domain.entities import Job
from backlog_link.domain.services import check_url, check_user_id
from backlog_link.domain.value_objects import FormValidation, ProjectLinkConfig


logger = logging.getLogger(__name__)

FORM_SECTION = "backlog"


class ProjectLinkForm(BaseModel):
    """Submitted project link fields, named as in the configuration form."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    url: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    password: Optional[str] = None
    api_key: Optional[str] = Field(default=None, alias="apiKey")

    def to_config(self) -> ProjectLinkConfig:
        return ProjectLinkConfig(
            url=self.url,
            user_id=self.user_id,
            password=self.password,
            api_key=self.api_key,
        )


@ExtensionRegistry.register_descriptor
class ProjectLinkDescriptor(PropertyDescriptor):
    """
    Descriptor of the Backlog project link property.

    Only jobs that can be built with parameters accept the property.
    """

    PROPERTY_TYPE = ProjectLinkConfig

    @property
    def display_name(self) -> str:
        return messages.get_message(messages.DISPLAY_NAME)

    def is_applicable(self, job: Job) -> bool:
        return job.is_parameterized

    def do_check_url(self, url: Optional[str], locale: str = messages.DEFAULT_LOCALE) -> FormValidation:
        return check_url(url, locale)

    def do_check_user_id(
        self, user_id: Optional[str], locale: str = messages.DEFAULT_LOCALE
    ) -> FormValidation:
        return check_user_id(user_id, locale)

    def new_instance(self, form_data: dict[str, Any]) -> Optional[ProjectLinkConfig]:
        """
        Bind submitted form data into a new ProjectLinkConfig.

        The fields are read from the ``backlog`` section of the payload, or
        from the payload itself when it is flat.

        Args:
            form_data: Submitted form payload.

        Returns:
            The new config, or None for an empty payload.

        Raises:
            ValidationError: If the fields have the wrong types.
        """
        if not form_data:
            return None

        fields = form_data.get(FORM_SECTION, form_data)
        form = ProjectLinkForm.model_validate(fields)
        config = form.to_config()
        logger.debug("Bound project link config for %s", config.url)
        return config
