# Services package init
"""
Bug Tracker Backend — Services Layer
======================================

What:  Business logic between routes (HTTP) and the store (persistence).

Service Inventory:
    - BugService: create / list / update / delete, store error translation
"""
