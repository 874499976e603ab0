# Routes package init
"""
Notes API - API Routes Package
===============================

Route Inventory:
    - notes.py:   GET    /notes            (list, optional ?title= filter)
                  GET    /notes/{id}       (read one)
                  POST   /notes            (create)
                  PUT    /notes/{id}       (merge update)
                  DELETE /notes/{id}       (delete)
    - health.py:  GET    /health           (service health check)

Routes stay thin: they extract request data, call NoteService and set the
status code. Business rules live in app/services.
"""
