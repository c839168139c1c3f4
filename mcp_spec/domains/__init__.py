"""
Tool Domains

Each domain module contains the tools for one area of functionality.
This isolation keeps adding/removing a domain a single-file operation.

To add a new domain:
1. Create domains/newdomain.py with its tool definitions
2. Include them in tools.default_tools()
"""

from .basic import BASIC_TOOLS
from .spec_search import create_spec_search_tools

__all__ = [
    "BASIC_TOOLS",
    "create_spec_search_tools",
]
