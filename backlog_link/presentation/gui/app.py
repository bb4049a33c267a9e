"""
Backlog Link Main Application - Flet GUI

Job configuration page: the project link form and the resulting job page
links.
"""

import logging
from typing import Any, Optional

import flet as ft

from backlog_link.application.descriptors import ProjectLinkDescriptor
from backlog_link.application.extensions import ExtensionRegistry, load_extensions
from backlog_link.application.use_cases import ConfigureJobUseCase
from backlog_link.config.settings import Settings
from backlog_link.domain.entities import Job
from backlog_link.domain.value_objects import ProjectLinkConfig
from backlog_link.infrastructure.security import CryptoService
from backlog_link.infrastructure.storage import SQLiteAdapter
from .components import ProjectLinkPanel, create_link_button
from .styles import Theme


logger = logging.getLogger(__name__)


def build_app(page: ft.Page, settings: Settings) -> None:
    """Build the job configuration page."""
    load_extensions()

    page.title = "Backlog Link"
    page.theme_mode = ft.ThemeMode.DARK
    page.theme = Theme.get_flet_theme()
    page.bgcolor = Theme.DARK_BG
    page.padding = 20
    page.scroll = ft.ScrollMode.AUTO

    crypto = CryptoService(settings.encryption_key_path)
    crypto.initialize()
    storage = SQLiteAdapter(settings.database_path, crypto)
    use_case = ConfigureJobUseCase(storage=storage)
    descriptor = ExtensionRegistry.descriptor_for(ProjectLinkConfig) or ProjectLinkDescriptor()

    state: dict[str, Any] = {"job": None}

    links_row = ft.Row(spacing=Theme.SPACING_SM)
    status_text = ft.Text("", color=Theme.DARK_TEXT_SECONDARY)

    def render_links(job: Optional[Job]) -> None:
        links_row.controls.clear()
        if job is not None:
            for action in ExtensionRegistry.actions_for(job):
                links_row.controls.append(create_link_button(action))

    async def on_save(form_data: dict[str, Any]) -> bool:
        job = state["job"]
        if job is None:
            status_text.value = "Load a job first."
            page.update()
            return False
        await storage.initialize()
        config = await use_case.execute(job, form_data)
        panel.show(config)
        status_text.value = "Saved." if config else "Link removed."
        render_links(job)
        page.update()
        return True

    panel = ProjectLinkPanel(descriptor, on_save=on_save, locale=settings.locale)

    job_name_input = ft.TextField(
        label="Job",
        hint_text="folder/job-name",
        border_radius=Theme.RADIUS_MD,
        prefix_icon="work",
    )
    pipeline_switch = ft.Switch(label="Pipeline job", value=False)

    async def on_load(e) -> None:
        name = (job_name_input.value or "").strip()
        if not name:
            return
        await storage.initialize()
        job = Job(name=name, is_pipeline=bool(pipeline_switch.value))
        config = await use_case.load(job)
        state["job"] = job
        panel.show(config)
        status_text.value = f"Loaded {job.full_name}."
        render_links(job)
        page.update()

    async def on_disconnect(e) -> None:
        await storage.close()

    page.on_disconnect = on_disconnect

    page.add(
        ft.Column([
            ft.Row([
                job_name_input,
                pipeline_switch,
                ft.ElevatedButton("Load", icon="download", on_click=on_load),
            ], spacing=Theme.SPACING_MD),
            panel.container,
            links_row,
            status_text,
        ], spacing=Theme.SPACING_MD)
    )
    logger.info("Job configuration page ready")
