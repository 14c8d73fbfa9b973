"""
Endpoint subpackage.

Each module defines an APIRouter for one domain (schedules, workouts,
exercises) plus the unauthenticated health check.  The domain routers
are aggregated in ``api/router.py``.
"""
