"""
Unit tests for the extension registry and the link action factory.
"""

import pytest

from backlog_link.application.descriptors import ProjectLinkDescriptor
from backlog_link.application.extensions import (
    ActionFactory,
    ExtensionRegistry,
    PropertyDescriptor,
    load_extensions,
)
from backlog_link.application.link_action_factory import LinkActionFactory
from backlog_link.domain.entities import Folder, Job, MultiBranchProject
from backlog_link.domain.value_objects import LinkAction, ProjectLinkConfig


@pytest.fixture(autouse=True)
def registry():
    """Load built-in extensions and restore the registry afterwards."""
    load_extensions()
    descriptors = dict(ExtensionRegistry._descriptors)
    factories = dict(ExtensionRegistry._factories)
    yield ExtensionRegistry
    ExtensionRegistry._descriptors.clear()
    ExtensionRegistry._descriptors.update(descriptors)
    ExtensionRegistry._factories.clear()
    ExtensionRegistry._factories.update(factories)


CONFIG = ProjectLinkConfig(url="https://example.backlog.jp/projects/ABC")


class TestLinkActionFactory:
    """Tests for the pipeline job link factory."""

    def test_applies_to_pipeline_jobs_only(self):
        factory = LinkActionFactory()

        assert factory.applies_to(Job(name="p", is_pipeline=True)) is True
        assert factory.applies_to(Job(name="f")) is False

    def test_single_action_for_standalone_job(self):
        """Should return one action bound to the job's config."""
        job = Job(name="p", is_pipeline=True)
        job.add_property(CONFIG)

        actions = LinkActionFactory().create_for(job)

        assert len(actions) == 1
        assert actions[0].config is CONFIG

    def test_job_in_plain_folder(self):
        job = Job(name="p", parent=Folder("team"), is_pipeline=True)
        assert len(LinkActionFactory().create_for(job)) == 1

    def test_no_action_for_multi_branch_branches(self):
        """Branch jobs of a multi-branch project get no action."""
        job = Job(name="main", parent=MultiBranchProject("repo"), is_pipeline=True)
        job.add_property(CONFIG)

        assert LinkActionFactory().create_for(job) == ()

    def test_tolerates_missing_config(self):
        """Should still return an action when nothing is configured."""
        actions = LinkActionFactory().create_for(Job(name="p", is_pipeline=True))

        assert len(actions) == 1
        assert actions[0].is_visible is False

    def test_idempotent(self):
        job = Job(name="p", is_pipeline=True)
        job.add_property(CONFIG)
        factory = LinkActionFactory()

        assert factory.create_for(job) == factory.create_for(job)


class TestExtensionRegistry:
    """Tests for registration and lookups."""

    def test_builtin_descriptor_registered(self, registry):
        assert isinstance(registry.descriptor_for(ProjectLinkConfig), ProjectLinkDescriptor)

    def test_applicable_descriptors(self, registry):
        assert registry.applicable_descriptors(Job(name="j", is_parameterized=False)) == []
        assert len(registry.applicable_descriptors(Job(name="j"))) == 1

    def test_actions_for_freestyle_job_use_property(self, registry):
        """Non-pipeline jobs get the action from their property."""
        job = Job(name="f")
        job.add_property(CONFIG)

        actions = registry.actions_for(job)

        assert actions == [LinkAction(CONFIG)]

    def test_actions_for_pipeline_job_use_factory(self, registry):
        """Pipeline jobs get exactly one action, from the factory."""
        job = Job(name="p", is_pipeline=True)
        job.add_property(CONFIG)

        assert registry.actions_for(job) == [LinkAction(CONFIG)]

    def test_actions_for_unconfigured_freestyle_job(self, registry):
        assert registry.actions_for(Job(name="f")) == []

    def test_register_rejects_non_descriptor(self, registry):
        with pytest.raises(TypeError):
            registry.register_descriptor(object)  # type: ignore

    def test_register_requires_property_type(self, registry):
        class NoType(PropertyDescriptor):
            display_name = "x"

            def is_applicable(self, job):
                return True

            def new_instance(self, form_data):
                return None

        with pytest.raises(TypeError):
            registry.register_descriptor(NoType)

    def test_register_custom_factory(self, registry):
        class Marker:
            pass

        @registry.register_action_factory
        class MarkerFactory(ActionFactory):
            def applies_to(self, job):
                return True

            def create_for(self, job):
                return (Marker(),)

        actions = registry.actions_for(Job(name="f"))

        assert len(actions) == 1
        assert isinstance(actions[0], Marker)
