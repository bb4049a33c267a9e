"""
Backlog Link - Per-job links to Backlog spaces and projects.

Entry point for the configuration UI.
"""

import logging
import sys

import flet as ft

from backlog_link.config.settings import Settings, get_settings


def setup_logging(settings: Settings) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def run() -> None:
    """Console script target."""
    settings = get_settings()
    setup_logging(settings)

    def main(page: ft.Page) -> None:
        from backlog_link.presentation.gui.app import build_app
        build_app(page, settings)

    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
