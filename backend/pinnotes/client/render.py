"""
PinNotes Client — Note List Rendering
=======================================

What:  Orders notes for display and renders them to an HTML fragment.
How:   jinja2 with autoescaping, so every user-supplied string (title,
       category, content, even the id) is HTML-escaped on insertion.

Display ordering:
    Pinned notes first; within each group, most recently updated first.
    The server already sorts by updatedAt, but the client does not rely
    on it.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import Environment, PackageLoader

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parses an ISO 8601 timestamp from the API; None when unparseable."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: Any) -> str:
    """Local-time display string for an API timestamp; empty when invalid."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    return parsed.astimezone().strftime("%Y-%m-%d %H:%M")


def sort_for_display(notes: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # Two stable sorts: recency first, then pinned-ness on top of it
    by_recency = sorted(
        notes,
        key=lambda note: parse_timestamp(note.get("updatedAt")) or _EPOCH,
        reverse=True,
    )
    return sorted(by_recency, key=lambda note: not note.get("isPinned"))


_env = Environment(
    loader=PackageLoader("pinnotes.client", "templates"),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["format_date"] = format_date


def render_notes(notes: Sequence[Dict[str, Any]]) -> str:
    """Renders the note cards (or the empty-list hint) as an HTML fragment."""
    template = _env.get_template("notes.html")
    return template.render(notes=sort_for_display(notes))


def render_message(message: str) -> str:
    """Renders a single escaped paragraph, used in place of the list on errors."""
    return _env.from_string("<p>{{ message }}</p>").render(message=message)
