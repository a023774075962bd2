# Services package init
"""
PinNotes Backend — Services Layer
===================================

What:  Business logic between routes (HTTP) and the database (persistence).
How:   NoteStore owns the note collection: it validates writes, assigns ids
       and timestamps, and raises domain exceptions the app turns into
       response envelopes.

Service Inventory:
    - NoteStore: create / list_all / update_by_id / delete_by_id
"""
