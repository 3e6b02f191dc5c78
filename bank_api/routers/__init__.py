"""
FastAPI routers grouped by domain.

Each file inside this package exposes an APIRouter that app.py includes.
"""
