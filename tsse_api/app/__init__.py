"""
Application package initializer.

This package contains the entrypoint for the API and all of its
submodules.  Each domain (schedules, workouts, exercises) has its own
schema module, repository, service and router under ``api/endpoints``.
Configuration, logging, persistence and security helpers live in
``core``.
"""

from .main import app, create_app  # noqa: F401
