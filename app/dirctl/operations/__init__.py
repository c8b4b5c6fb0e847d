"""Filesystem mutations and the confirmation layer above deletion."""

from dirctl.operations.confirm import (
    ConfirmDecision,
    DeleteOutcome,
    DeleteStatus,
    PromptConfirmation,
    always_yes,
    delete_confirmed,
)
from dirctl.operations.operator import FileOperator

__all__ = [
    "ConfirmDecision",
    "DeleteOutcome",
    "DeleteStatus",
    "FileOperator",
    "PromptConfirmation",
    "always_yes",
    "delete_confirmed",
]
