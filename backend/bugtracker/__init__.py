"""
Bug Tracker Backend — Application Package
===========================================

What: A minimal issue tracker: a JSON HTTP API over a single bug collection.

Architecture Note:

    ┌─────────────────────────────────────┐
    │        Routes (API Layer)           │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (CRUD Logic)        │  ← defaults, error translation
    ├─────────────────────────────────────┤
    │        Schemas & Models (Data)      │  ← Pydantic + SQLAlchemy ORM
    ├─────────────────────────────────────┤
    │        Store (Persistence)          │  ← BugStore: SQL or in-memory
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
