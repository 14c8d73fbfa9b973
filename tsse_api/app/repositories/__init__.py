"""
Persistence gateway.

Repositories translate between the pydantic models and the SQLite
tables.  Services only talk to the ``Repository`` protocol defined in
``base``, so they never see SQL and can be tested with fakes.
"""
