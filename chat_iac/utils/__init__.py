"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, and output utilities.
"""

from chat_iac.utils.naming import ResourceNamer
from chat_iac.utils.tags import create_tags, merge_tags
from chat_iac.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "merge_tags",
    "write_outputs_to_env",
]
