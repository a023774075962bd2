# Routes package init
"""
PinNotes Backend — API Routes Package
=======================================

Route Inventory:
    - notes.py:   GET    /api/notes          (list every note)
                  POST   /api/notes          (create)
                  PUT    /api/notes/{id}     (partial update)
                  DELETE /api/notes/{id}     (hard delete)
    - health.py:  GET    /health             (service health check)

Design Principle:
    Routes stay THIN: they extract the body, call the note store and wrap
    the result in the response envelope. Errors are raised, never
    formatted here; main.py owns the error envelopes.
"""
