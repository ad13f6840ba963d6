"""Claude integration module."""
from .client import (
    AgentClient,
    AgentResult,
    ClaudeCoordinator,
    build_restricted_options,
    create_claude_options,
)

__all__ = [
    "AgentClient",
    "AgentResult",
    "ClaudeCoordinator",
    "build_restricted_options",
    "create_claude_options",
]
