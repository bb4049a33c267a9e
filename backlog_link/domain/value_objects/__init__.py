# Domain Value Objects
from .secret import Secret
from .link_action import LinkAction
from .project_link_config import ProjectLinkConfig, normalize_url
from .form_validation import FormValidation, ValidationKind

__all__ = [
    "Secret",
    "LinkAction",
    "ProjectLinkConfig",
    "normalize_url",
    "FormValidation",
    "ValidationKind",
]
