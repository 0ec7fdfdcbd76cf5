"""Thread aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from thredge.domain.model.common import DomainModel
from thredge.domain.value import ThreadId

TITLE_MAX_LENGTH = 200


def derive_title(body: str) -> str:
    """Derive a thread title from its body.

    Uses the first non-blank line, falling back to the whole trimmed body,
    truncated to TITLE_MAX_LENGTH characters.
    """
    first_line = next((line.strip() for line in body.splitlines() if line.strip()), "")
    source = first_line or body.strip()
    return source[:TITLE_MAX_LENGTH]


class Thread(DomainModel):
    """Thread aggregate root.

    A thread owns a flat list of entries that form its reply tree.
    """

    id: ThreadId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    body: Optional[str] = None
    hidden: bool = False
    pinned: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    last_activity_at: datetime = Field(default_factory=datetime.now)
