"""
Link Action Factory - Backlog link for pipeline jobs.
"""

from backlog_link.application.extensions import ActionFactory, ExtensionRegistry
from backlog_link.domain.entities import Job
from backlog_link.domain.value_objects import LinkAction, ProjectLinkConfig


@ExtensionRegistry.register_action_factory
class LinkActionFactory(ActionFactory):
    """
    Attaches the Backlog link action to pipeline jobs.

    Branch jobs of a multi-branch project get no action here; the branch
    collaborator supplies their links.
    """

    def applies_to(self, job: Job) -> bool:
        return job.is_pipeline

    def create_for(self, job: Job) -> tuple[LinkAction, ...]:
        parent = getattr(job, "parent", None)
        if getattr(parent, "is_multi_branch", False):
            return ()
        return (LinkAction(job.get_property(ProjectLinkConfig)),)
