"""CLI package for Password Feedback.

Provides interactive flows for explaining feedback on matcher output.
"""

from cli.explain import explain_file, explain_flow, list_messages_flow

__all__ = [
    "explain_file",
    "explain_flow",
    "list_messages_flow",
]
