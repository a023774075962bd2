"""
PinNotes Client — Advisory Form Validation
============================================

Mirrors the server's note rules so obvious mistakes are caught before a
request is sent. Advisory only: the server re-checks everything and its
error list is what the user finally sees on rejection.
"""

from typing import List

from pinnotes.constants import (
    CATEGORY_MAX_LENGTH,
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)


def validate_form(title: str, content: str, category: str = "") -> List[str]:
    """Returns user-facing messages for every rule the form breaks (empty when valid)."""
    errors: List[str] = []

    title = (title or "").strip()
    content = (content or "").strip()
    category = (category or "").strip()

    if not title:
        errors.append("Title is required.")
    else:
        if len(title) < TITLE_MIN_LENGTH:
            errors.append(f"Title must be at least {TITLE_MIN_LENGTH} characters.")
        if len(title) > TITLE_MAX_LENGTH:
            errors.append(f"Title cannot be longer than {TITLE_MAX_LENGTH} characters.")

    if not content:
        errors.append("Content is required.")
    else:
        if len(content) < CONTENT_MIN_LENGTH:
            errors.append(f"Content must be at least {CONTENT_MIN_LENGTH} characters.")
        if len(content) > CONTENT_MAX_LENGTH:
            errors.append(f"Content cannot be longer than {CONTENT_MAX_LENGTH} characters.")

    if len(category) > CATEGORY_MAX_LENGTH:
        errors.append(f"Category cannot be longer than {CATEGORY_MAX_LENGTH} characters.")

    return errors


def edit_is_acceptable(title: str, content: str) -> bool:
    """Quick length check used by the prompt-based edit flow."""
    return (
        len(title.strip()) >= TITLE_MIN_LENGTH
        and len(content.strip()) >= CONTENT_MIN_LENGTH
    )
