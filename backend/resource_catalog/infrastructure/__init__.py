"""Infrastructure Layer - database access, record stores and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy exceptions are mapped to catalog errors before leaving this layer
"""
