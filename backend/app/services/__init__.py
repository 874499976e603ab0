# Services package init
"""
Notes API - Services Layer
===========================

What:  Business logic between routes (HTTP) and database (persistence).

Service Inventory:
    - NoteService: list, get, create, update (merge) and delete notes
"""
