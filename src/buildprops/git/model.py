# topmark:header:start
#
#   project      : BuildProps
#   file         : model.py
#   file_relpath : src/buildprops/git/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source-control metadata value type and date helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from buildprops.constants import COMMIT_DATE_FORMAT, SHORT_SHA_LENGTH, UNKNOWN_SHA


@dataclass(frozen=True, slots=True)
class GitMetadata:
    """Commit date and short SHA for the current build.

    Attributes:
        date (str): ``yyyyMMdd-HHmmss`` UTC timestamp of the commit.
        sha (str): Short (7-char) commit hash, or ``"unknown"``.
    """

    date: str
    sha: str

    @classmethod
    def unknown(cls, now: datetime) -> GitMetadata:
        """Return the degraded-but-valid metadata used when no provider answers."""
        return cls(date=format_commit_date(now), sha=UNKNOWN_SHA)


def format_commit_date(moment: datetime) -> str:
    """Format ``moment`` as ``yyyyMMdd-HHmmss`` in UTC.

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(COMMIT_DATE_FORMAT)


def parse_commit_date(text: str) -> datetime:
    """Parse an ISO 8601 timestamp or an already formatted ``yyyyMMdd-HHmmss`` value.

    Args:
        text (str): The timestamp text.

    Returns:
        datetime: An aware datetime (UTC when ``text`` carries no offset).

    Raises:
        ValueError: If ``text`` matches neither format.
    """
    text = text.strip()
    try:
        moment: datetime = datetime.strptime(text, COMMIT_DATE_FORMAT)
    except ValueError:
        # Python < 3.11 does not accept a trailing "Z"
        moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def shorten_sha(sha: str) -> str:
    """Return the abbreviated commit hash used in version strings."""
    return sha.strip()[:SHORT_SHA_LENGTH]
