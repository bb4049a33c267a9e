"""
Link Button Component - Renders a Backlog link action.
"""

import flet as ft

from backlog_link.domain.value_objects import LinkAction
from ..styles import Theme


def create_link_button(action: LinkAction) -> ft.Control:
    """
    Create the job page button for a link action.

    An action without a target renders as an empty container.
    """
    if not action.is_visible:
        return ft.Container()

    return ft.TextButton(
        content=ft.Row([
            ft.Icon("open_in_new", color=Theme.PRIMARY),
            ft.Text(action.display_name, color=Theme.PRIMARY),
        ], spacing=Theme.SPACING_SM),
        url=action.url_name,
        tooltip=action.url_name,
    )
