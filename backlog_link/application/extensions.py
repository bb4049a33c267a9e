"""Extension registry for job property descriptors and action factories.

Descriptors and factories register themselves with class decorators when
their module is imported:

    @ExtensionRegistry.register_descriptor
    class ProjectLinkDescriptor(PropertyDescriptor):
        PROPERTY_TYPE = ProjectLinkConfig
        ...

    actions = ExtensionRegistry.actions_for(job)
"""

from __future__ import annotations

import importlib
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from backlog_link.domain.entities import Job

logger = logging.getLogger(__name__)


class PropertyDescriptor(ABC):
    """Metadata and form behavior of one job property type."""

    PROPERTY_TYPE: ClassVar[type]

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Name shown on the job configuration page."""

    @abstractmethod
    def is_applicable(self, job: Job) -> bool:
        """Whether the property can be attached to the job."""

    @abstractmethod
    def new_instance(self, form_data: dict[str, Any]) -> Optional[Any]:
        """Bind submitted form data; ``None`` means no property."""


class ActionFactory(ABC):
    """Produces transient actions for jobs it applies to."""

    @abstractmethod
    def applies_to(self, job: Job) -> bool:
        """Whether this factory handles the job."""

    @abstractmethod
    def create_for(self, job: Job) -> tuple[Any, ...]:
        """Actions for the job; empty when none should be shown."""


class ExtensionRegistry:
    """Registry of property descriptors and action factories.

    All methods are class methods. Registration mutates class-level tables
    under a lock; lookups take a snapshot under the same lock.
    """

    _descriptors: ClassVar[dict[type, PropertyDescriptor]] = {}
    _factories: ClassVar[dict[type, ActionFactory]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def register_descriptor(
        cls, descriptor_class: type[PropertyDescriptor]
    ) -> type[PropertyDescriptor]:
        """Decorator registering a descriptor for its PROPERTY_TYPE.

        Raises:
            TypeError: If the class is not a PropertyDescriptor or lacks
                a PROPERTY_TYPE.
        """
        if not isinstance(descriptor_class, type) or not issubclass(
            descriptor_class, PropertyDescriptor
        ):
            raise TypeError(
                f"Descriptor must be a subclass of PropertyDescriptor, "
                f"got {type(descriptor_class).__name__}"
            )
        property_type = getattr(descriptor_class, "PROPERTY_TYPE", None)
        if not isinstance(property_type, type):
            raise TypeError(
                f"Descriptor {descriptor_class.__name__} must set PROPERTY_TYPE to a class"
            )

        with cls._lock:
            existing = cls._descriptors.get(property_type)
            if existing is not None and type(existing) is not descriptor_class:
                logger.warning(
                    "Replacing descriptor for %s: %s -> %s",
                    property_type.__name__,
                    type(existing).__name__,
                    descriptor_class.__name__,
                )
            cls._descriptors[property_type] = descriptor_class()
        logger.debug("Registered descriptor %s", descriptor_class.__name__)
        return descriptor_class

    @classmethod
    def register_action_factory(
        cls, factory_class: type[ActionFactory]
    ) -> type[ActionFactory]:
        """Decorator registering an action factory.

        Raises:
            TypeError: If the class is not an ActionFactory.
        """
        if not isinstance(factory_class, type) or not issubclass(factory_class, ActionFactory):
            raise TypeError(
                f"Factory must be a subclass of ActionFactory, got {type(factory_class).__name__}"
            )
        with cls._lock:
            cls._factories[factory_class] = factory_class()
        logger.debug("Registered action factory %s", factory_class.__name__)
        return factory_class

    @classmethod
    def descriptor_for(cls, property_type: type) -> Optional[PropertyDescriptor]:
        with cls._lock:
            return cls._descriptors.get(property_type)

    @classmethod
    def applicable_descriptors(cls, job: Job) -> list[PropertyDescriptor]:
        """Descriptors whose property can be attached to the job."""
        with cls._lock:
            descriptors = list(cls._descriptors.values())
        return [d for d in descriptors if d.is_applicable(job)]

    @classmethod
    def actions_for(cls, job: Job) -> list[Any]:
        """Collect the actions shown on a job page.

        Non-pipeline jobs get the actions of their attached properties;
        factories add actions for the jobs they apply to.
        """
        actions: list[Any] = []
        if not job.is_pipeline:
            for prop in job.properties:
                get_job_action = getattr(prop, "get_job_action", None)
                if get_job_action is None:
                    continue
                action = get_job_action(job)
                if action is not None:
                    actions.append(action)

        with cls._lock:
            factories = list(cls._factories.values())
        for factory in factories:
            if factory.applies_to(job):
                actions.extend(factory.create_for(job))
        return actions


EXTENSION_MODULES = (
    "backlog_link.application.descriptors",
    "backlog_link.application.link_action_factory",
)


def load_extensions() -> None:
    """Import the built-in extension modules so they register themselves."""
    for module_name in EXTENSION_MODULES:
        importlib.import_module(module_name)
