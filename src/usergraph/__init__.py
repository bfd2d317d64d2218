"""
usergraph
GraphQL API for user records held in memory
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
