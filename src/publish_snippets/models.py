"""Data models for the publish_snippets pipeline stage."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class PublishedItem:
    """The part of an existing WordPress post needed for duplicate checks."""
    headline: str
    kicker: str
    author_name: str
    link: str = ""


class PublishOutcome(str, Enum):
    """Terminal state of one publish attempt."""
    ABORTED_VALIDATION = "aborted_validation"
    ABORTED_DUPLICATE = "aborted_duplicate"
    DRY_RUN = "dry_run"
    CONFIRMED = "confirmed"
    FAILED = "failed"


@dataclass
class PublishResult:
    """What happened to an article handed to the publish gate."""
    outcome: PublishOutcome
    errors: list[str] = field(default_factory=list)
    duplicate: Optional[PublishedItem] = None
    link: str = ""
    message: str = ""

    @property
    def succeeded(self) -> bool:
        # Duplicates count as handled
        return self.outcome in (
            PublishOutcome.CONFIRMED,
            PublishOutcome.ABORTED_DUPLICATE,
            PublishOutcome.DRY_RUN,
        )
