"""
Feature modules of the SportFwd backend.

Each module keeps its own:
- interfaces.py: Protocol definitions for the module's service
- models.py: Pydantic models for rows and request/response bodies
- repository.py: Supabase table access (where the module owns tables)
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Modules talk to each other through interfaces and repositories; wiring
lives in api/dependencies.py.
"""
