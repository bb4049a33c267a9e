# Domain Services
from .config_validator import check_url, check_user_id

__all__ = ["check_url", "check_user_id"]
