# Domain Entities
from .job import Folder, Job, MultiBranchProject

__all__ = ["Folder", "Job", "MultiBranchProject"]
