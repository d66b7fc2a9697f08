"""
ConfTrack Backend: Application Package Initializer
==================================================

What: Marks the `conftrack` directory as a Python package.
Who:  Imported by uvicorn (`conftrack.main:app`), Alembic and pytest.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (CRUD + webhook logic)  │  ← Orchestration, error mapping
    ├─────────────────────────────────────┤
    │   Repositories (persistence gateway)│  ← create / find / update / delete
    ├─────────────────────────────────────┤
    │  Models & Schemas │ Database        │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    Routes never touch the ORM directly; services never build HTTP responses.
"""

__version__ = "1.0.0"
