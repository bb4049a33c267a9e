"""
FormValidation Value Object - Inline, advisory result of a field check.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from backlog_link.domain.messages import get_message


class ValidationKind(Enum):
    """Severity of a field check."""

    OK = "OK"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class FormValidation:
    """
    Display-ready result rendered next to a form field.

    Attributes:
        kind: Severity
        message: Localized message text (empty when OK)
        message_key: Catalog key the message was rendered from
    """

    kind: ValidationKind
    message: str = ""
    message_key: Optional[str] = None

    @classmethod
    def ok(cls) -> "FormValidation":
        return cls(ValidationKind.OK)

    @classmethod
    def warning(cls, message_key: str, locale: str = "en") -> "FormValidation":
        return cls(ValidationKind.WARNING, get_message(message_key, locale), message_key)

    @classmethod
    def error(cls, message_key: str, locale: str = "en") -> "FormValidation":
        return cls(ValidationKind.ERROR, get_message(message_key, locale), message_key)

    @property
    def is_ok(self) -> bool:
        return self.kind == ValidationKind.OK

    @property
    def is_error(self) -> bool:
        return self.kind == ValidationKind.ERROR
