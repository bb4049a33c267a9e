# GUI Components
from .link_button import create_link_button
from .project_link_panel import ProjectLinkPanel

__all__ = [
    "create_link_button",
    "ProjectLinkPanel",
]
