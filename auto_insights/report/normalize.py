"""Normalize board item field values into a name-keyed record."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

from ..github_client.models import (
    BoardItem,
    DraftIssueContent,
    IssueContent,
    IterationFieldValue,
    PullRequestContent,
    PullRequestFieldValue,
    SingleSelectFieldValue,
    UnknownFieldValue,
)

STATUS_FIELD = "Status"
ITERATION_FIELD = "Iteration"


@dataclass(frozen=True)
class SelectValue:
    """Selected option of a single select field."""

    value: str


@dataclass(frozen=True)
class IterationValue:
    """Iteration a card is assigned to."""

    title: str
    start_date: date
    duration: int | None = None

    @property
    def start(self) -> datetime:
        return datetime.combine(self.start_date, datetime.min.time(), timezone.utc)

    @property
    def end(self) -> datetime | None:
        """Exclusive window end, None when the board has no durations."""
        if self.duration is None:
            return None
        return self.start + timedelta(days=self.duration)


FieldDescriptor = SelectValue | IterationValue


@dataclass
class NormalizedItem:
    """A board item with its field values keyed by field name."""

    content: IssueContent | PullRequestContent | DraftIssueContent | None
    fields: dict[str, FieldDescriptor] = field(default_factory=dict)

    @property
    def status(self) -> SelectValue | None:
        value = self.fields.get(STATUS_FIELD)
        return value if isinstance(value, SelectValue) else None

    @property
    def iteration(self) -> IterationValue | None:
        value = self.fields.get(ITERATION_FIELD)
        return value if isinstance(value, IterationValue) else None


def normalize_field_values(
    field_values: Sequence[
        IterationFieldValue
        | SingleSelectFieldValue
        | PullRequestFieldValue
        | UnknownFieldValue
    ],
) -> dict[str, FieldDescriptor]:
    """Build a field name -> value mapping from raw field values.

    Linked pull request values are left out (they feed the linked PR index)
    and unrecognized values are dropped. When two values share a field name
    the later one wins.
    """
    fields: dict[str, FieldDescriptor] = {}
    for entry in field_values:
        if isinstance(entry, SingleSelectFieldValue):
            fields[entry.field.name] = SelectValue(value=entry.name)
        elif isinstance(entry, IterationFieldValue):
            fields[entry.field.name] = IterationValue(
                title=entry.title,
                start_date=entry.start_date,
                duration=entry.duration,
            )
        elif isinstance(entry, (PullRequestFieldValue, UnknownFieldValue)):
            continue
        else:
            raise TypeError(f"Unhandled field value type: {type(entry).__name__}")
    return fields


def normalize_item(item: BoardItem) -> NormalizedItem:
    """Normalize a single board item."""
    return NormalizedItem(
        content=item.content, fields=normalize_field_values(item.field_values)
    )
