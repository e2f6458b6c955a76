"""
Domain packages, one per resource of the dashboard.

Each package follows the same layout:
- schemas.py     request validation (pydantic)
- repository.py  SQLAlchemy queries
- service.py     business rules, raises daycare.errors
- router.py      FastAPI endpoints
"""
