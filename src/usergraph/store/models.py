"""Record types held by the user store."""

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True)
class UserRecord:
    """A stored user.

    Records are immutable; updates replace the stored instance.
    """

    id: str
    name: str
    email: str
    created_at: str


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as an ISO-8601 UTC string with millisecond precision."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
