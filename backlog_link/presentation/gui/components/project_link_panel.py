"""
Project Link Panel Component

Backlog URL and credentials form with inline validation.
"""

import flet as ft
from typing import Any, Awaitable, Callable, Optional

from backlog_link.application.descriptors import FORM_SECTION, ProjectLinkDescriptor
from backlog_link.domain.value_objects import FormValidation, ProjectLinkConfig
from ..styles import Theme


FormCallback = Callable[[dict[str, Any]], Awaitable[bool]]


def _error_text(result: FormValidation) -> Optional[str]:
    return None if result.is_ok else result.message


class ProjectLinkPanel:
    """
    Configuration panel for the Backlog link of a job.

    Field checks are advisory: errors are shown under the field but never
    prevent saving. Blank secret fields keep the stored secrets. The save
    callback returns whether the form was stored; typed secrets are kept
    until it does.
    """

    def __init__(
        self,
        descriptor: ProjectLinkDescriptor,
        on_save: Optional[FormCallback] = None,
        locale: str = "en",
    ) -> None:
        self.descriptor = descriptor
        self.on_save = on_save
        self.locale = locale
        self._current: Optional[ProjectLinkConfig] = None

        self.url_input = ft.TextField(
            label="Backlog URL",
            hint_text="https://example.backlog.jp/projects/ABC",
            border_radius=Theme.RADIUS_MD,
            prefix_icon="link",
            on_change=self._on_url_change,
        )
        self.user_id_input = ft.TextField(
            label="User ID",
            border_radius=Theme.RADIUS_MD,
            prefix_icon="person",
            on_change=self._on_user_id_change,
        )
        self.password_input = ft.TextField(
            label="Password",
            password=True,
            can_reveal_password=True,
            border_radius=Theme.RADIUS_MD,
            prefix_icon="lock",
        )
        self.api_key_input = ft.TextField(
            label="API Key",
            password=True,
            can_reveal_password=True,
            border_radius=Theme.RADIUS_MD,
            prefix_icon="key",
        )

        self.container = ft.Container(
            content=ft.Column([
                ft.Text(descriptor.display_name, size=18, weight=ft.FontWeight.BOLD),
                self.url_input,
                self.user_id_input,
                self.password_input,
                self.api_key_input,
                ft.Row([
                    ft.ElevatedButton("Save", icon="save", on_click=self._on_save),
                    ft.OutlinedButton("Remove", icon="delete", on_click=self._on_remove),
                ], spacing=Theme.SPACING_MD),
            ], spacing=Theme.SPACING_MD),
            bgcolor=Theme.DARK_CARD,
            border_radius=Theme.RADIUS_LG,
            padding=Theme.SPACING_MD,
        )

    def _on_url_change(self, e) -> None:
        self.url_input.error_text = _error_text(
            self.descriptor.do_check_url(self.url_input.value, self.locale)
        )
        self.url_input.update()

    def _on_user_id_change(self, e) -> None:
        self.user_id_input.error_text = _error_text(
            self.descriptor.do_check_user_id(self.user_id_input.value, self.locale)
        )
        self.user_id_input.update()

    def _stored_secret(self, name: str) -> str:
        if self._current is None:
            return ""
        return getattr(self._current, name).reveal()

    def form_data(self) -> dict[str, Any]:
        """Current field values in the submitted form layout."""
        return {
            FORM_SECTION: {
                "url": self.url_input.value or "",
                "userId": self.user_id_input.value or "",
                "password": self.password_input.value or self._stored_secret("password"),
                "apiKey": self.api_key_input.value or self._stored_secret("api_key"),
            }
        }

    def show(self, config: Optional[ProjectLinkConfig]) -> None:
        """Fill the form from a stored config; secrets are never shown."""
        self._current = config
        self.url_input.value = config.url if config else ""
        self.user_id_input.value = (config.user_id or "") if config else ""
        self.password_input.value = ""
        self.api_key_input.value = ""
        self.url_input.error_text = None
        self.user_id_input.error_text = None

    async def submit(self) -> bool:
        """Send the form to the save callback; clear typed secrets once stored."""
        if self.on_save is None or not await self.on_save(self.form_data()):
            return False
        self.password_input.value = ""
        self.api_key_input.value = ""
        return True

    async def remove(self) -> bool:
        """Submit an empty form; reset the fields once the link is removed."""
        if self.on_save is None or not await self.on_save({}):
            return False
        self.show(None)
        return True

    async def _on_save(self, e) -> None:
        await self.submit()
        self.container.update()

    async def _on_remove(self, e) -> None:
        await self.remove()
        self.container.update()
