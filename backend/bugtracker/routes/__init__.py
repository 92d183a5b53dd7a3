# Routes package init
"""
Bug Tracker Backend — API Routes Package
==========================================

Route Inventory:
    - bugs.py:    POST   /api/bugs           (create)
                  GET    /api/bugs           (list)
                  PUT    /api/bugs/{id}      (merge-update)
                  DELETE /api/bugs/{id}      (delete)
    - health.py:  GET    /health             (service health check)

Routes stay thin: read the request, call BugService, return the schema.
"""
