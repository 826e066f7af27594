# Routes package init
"""
Contact Manager Backend — API Routes Package
==============================================

Route Inventory:
    - contacts.py: GET    /contacts               (list, ordered by name)
                   GET    /contacts/ping          (liveness, "Pong")
                   GET    /contacts/search        (multi-term search)
                   GET    /contacts/{id}          (single contact)
                   POST   /contacts               (create)
                   PUT    /contacts/{id}          (update)
                   DELETE /contacts/{id}          (delete)
    - health.py:   GET    /health                 (service + database check)

Routes stay thin: bind, validate, call the ContactService, wrap the result
in ApiResponse. Failures are raised as exceptions and rendered by the
handlers registered in main.py.
"""
