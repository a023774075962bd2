"""
PinNotes — Note Field Limits
==============================

What:  The length bounds and defaults every note must respect.
Who:   Shared by the ORM model, the pydantic schemas and the client's
       advisory form validation. Kept free of imports so the client can
       use it without pulling in the database layer.
"""

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100

CONTENT_MIN_LENGTH = 5
CONTENT_MAX_LENGTH = 5000

CATEGORY_MAX_LENGTH = 50
DEFAULT_CATEGORY = "General"
