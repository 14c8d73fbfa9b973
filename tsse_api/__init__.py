"""
Top‑level package for the TSSE training API.

This file makes ``tsse_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``tsse_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
