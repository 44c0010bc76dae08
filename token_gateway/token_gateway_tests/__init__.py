"""
Tests for the token gateway auth_service package.

The package under test contains:

- FastAPI application (`main.py`) and routers (`routes/`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Credential store and token issuance/validation (`credentials.py`, `tokens.py`)
- Resource serializers and Pydantic schemas (`serializers.py`, `schemas.py`)
"""
