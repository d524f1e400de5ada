# Routes package init
"""
QuickNote Backend — API Routes Package
========================================

Route Inventory:
    - notes.py:   GET    /api/notes          (list notes, newest first)
                  POST   /api/notes          (save a note)
                  DELETE /api/notes/{id}     (delete a note)
    - ai.py:      POST   /api/ai/complete    (next-word suggestions)
                  POST   /api/ai/correct     (spelling/grammar correction)
    - health.py:  GET    /health             (service health check)

The browser client (index.html, app.js, style.css) is mounted as static
files at "/" by main.create_app().

Routes stay thin: read the body, call the store or AI service, return JSON.
"""
