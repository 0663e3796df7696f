"""
Runtime collaborators: attribute storage, import service and resolution context.
"""

from .environment import AttributeScopes
from .imports import ImportHandler
from .context import ResolutionContext, IDENTIFIER_HINT
