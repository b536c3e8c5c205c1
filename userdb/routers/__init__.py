"""
FastAPI routers.

Each module groups endpoints for one resource and reads its collaborators
from ``request.app.state``.
"""
