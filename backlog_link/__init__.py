"""
Backlog Link - Per-job links to Backlog spaces and projects.
"""

__version__ = "0.1.0"
