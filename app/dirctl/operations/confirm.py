"""Confirmation policies for deletion.

FileOperator.delete never asks anything. Callers that want a yes/no/quit
gate wrap it with delete_confirmed() and a policy: an interactive prompt
or an always-yes batch policy.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

import typer

from dirctl.core.errors import DirctlError
from dirctl.listing.models import Entry
from dirctl.operations.operator import FileOperator

logger = logging.getLogger(__name__)


class ConfirmDecision(str, Enum):
    """Answer of a confirmation policy for one entry."""

    YES = "yes"
    NO = "no"
    QUIT = "quit"


class DeleteStatus(str, Enum):
    """Outcome of a confirmed deletion attempt."""

    DELETED = "deleted"
    SKIPPED = "skipped"
    FAILED = "failed"


ConfirmPolicy = Callable[[Entry], ConfirmDecision]


@dataclass(frozen=True, slots=True)
class DeleteOutcome:
    """Result of one entry passed to delete_confirmed().

    Attributes:
        entry: Entry that was considered.
        status: Whether it was deleted, skipped or failed.
        error: Error message if the deletion failed, None otherwise.
        dry_run: Whether the operator was in dry-run mode.
    """

    entry: Entry
    status: DeleteStatus
    error: str | None = None
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return self.status != DeleteStatus.FAILED


def always_yes(entry: Entry) -> ConfirmDecision:
    """Batch policy: confirm every entry."""
    _ = entry
    return ConfirmDecision.YES


def parse_answer(answer: str) -> ConfirmDecision:
    """Interpret a typed answer by its first letter (y/n/q, case-insensitive).

    Anything that is not yes or quit counts as no.
    """
    first = answer.strip().lower()[:1]
    if first == "y":
        return ConfirmDecision.YES
    if first == "q":
        return ConfirmDecision.QUIT
    return ConfirmDecision.NO


class PromptConfirmation:
    """Interactive policy asking on the terminal for each entry.

    Args:
        default: Answer used when the user just presses enter.
    """

    def __init__(self, default: str = "yes") -> None:
        self._default = default

    def __call__(self, entry: Entry) -> ConfirmDecision:
        answer = typer.prompt(
            f"Confirm deletion of ({entry.full_path}) {{y(es),n(o),q(uit)}}",
            default=self._default,
        )
        return parse_answer(answer)


def delete_confirmed(
    operator: FileOperator,
    entries: Iterable[Entry],
    policy: ConfirmPolicy,
) -> list[DeleteOutcome]:
    """Delete entries one by one, asking the policy before each.

    "." and ".." are reported as failures without asking. A QUIT answer
    stops processing; entries after it get no outcome. A failed deletion
    does not stop the remaining entries.

    Args:
        operator: Operator performing the unconfirmed deletions.
        entries: Entries to delete, in order.
        policy: Confirmation policy consulted per entry.

    Returns:
        One DeleteOutcome per processed entry.
    """
    outcomes: list[DeleteOutcome] = []

    for entry in entries:
        if entry.is_synthetic:
            outcomes.append(
                DeleteOutcome(
                    entry=entry,
                    status=DeleteStatus.FAILED,
                    error=f'Cannot delete "{entry.full_path}"',
                )
            )
            continue

        decision = policy(entry)
        if decision == ConfirmDecision.QUIT:
            logger.info("Deletion stopped by user at %s", entry.full_path)
            break
        if decision == ConfirmDecision.NO:
            outcomes.append(DeleteOutcome(entry=entry, status=DeleteStatus.SKIPPED))
            continue

        try:
            operator.delete(entry)
        except DirctlError as e:
            outcomes.append(DeleteOutcome(entry=entry, status=DeleteStatus.FAILED, error=str(e)))
            continue

        outcomes.append(
            DeleteOutcome(entry=entry, status=DeleteStatus.DELETED, dry_run=operator.dry_run)
        )

    return outcomes
