"""
Secret Value Object - Opaque wrapper for passwords and API keys.
"""

import hmac
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, repr=False, eq=False)
class Secret:
    """
    Immutable opaque secret.

    The cleartext is only reachable through ``reveal()``; ``str()`` and
    ``repr()`` are always masked so a secret cannot leak into logs or
    string formatting by accident.

    Absent input is normalized to the empty secret, which is falsy.
    """

    _value: str = field(default="")

    MASK = "********"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Secret":
        """Wrap a plain string; ``None`` and ``""`` give the empty secret."""
        if isinstance(value, Secret):
            return value
        return cls(value or "")

    def reveal(self) -> str:
        """Return the cleartext value."""
        return self._value

    @property
    def is_empty(self) -> bool:
        return not self._value

    def __bool__(self) -> bool:
        return bool(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return hmac.compare_digest(self._value.encode("utf-8"), other._value.encode("utf-8"))

    def __hash__(self) -> int:
        return hash((Secret, self._value))

    def __str__(self) -> str:
        return self.MASK if self._value else ""

    def __repr__(self) -> str:
        return f"Secret({self.MASK if self._value else ''})"
