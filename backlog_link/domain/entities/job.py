"""
Job Entity - Host-side job model that properties attach to.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar


P = TypeVar("P")


@dataclass
class Folder:
    """
    Container grouping jobs.

    Attributes:
        name: Folder name
        parent: Enclosing folder, if any
    """

    name: str
    parent: Optional["Folder"] = None

    is_multi_branch = False

    @property
    def full_name(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.full_name}/{self.name}"


@dataclass
class MultiBranchProject(Folder):
    """Container whose child jobs are the branches of one shared configuration."""

    is_multi_branch = True


@dataclass
class Job:
    """
    Job entity.

    Properties are keyed by their type, so attaching a property replaces
    any previous instance of the same type.

    Attributes:
        name: Job name, unique within its parent
        parent: Containing folder, if any
        is_parameterized: Whether the job can be built with parameters
        is_pipeline: Whether the job is a pipeline job
    """

    name: str
    parent: Optional[Folder] = None
    is_parameterized: bool = True
    is_pipeline: bool = False
    _properties: dict[type, Any] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate job data after initialization."""
        if not self.name:
            raise ValueError("name is required")

    @property
    def full_name(self) -> str:
        """Slash-separated path including the enclosing folders."""
        if self.parent is None:
            return self.name
        return f"{self.parent.full_name}/{self.name}"

    @property
    def properties(self) -> tuple[Any, ...]:
        return tuple(self._properties.values())

    def get_property(self, property_type: type[P]) -> Optional[P]:
        """Get the attached property of the given type."""
        return self._properties.get(property_type)

    def add_property(self, prop: Any) -> None:
        """Attach a property, replacing any of the same type."""
        self._properties[type(prop)] = prop

    def remove_property(self, property_type: type) -> Optional[Any]:
        """Detach and return the property of the given type."""
        return self._properties.pop(property_type, None)
