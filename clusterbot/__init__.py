"""Command parsing, parameter handling, modal state helpers and request verification for a cluster-launching chat bot."""

__version__ = "0.1.0"

__all__ = [
    "inputs",
    "interactions",
    "launch_context",
    "launch_validation",
    "mention",
    "modals",
    "params",
    "parser",
    "signing",
    "utils",
    "workflow_step",
]