"""
Pydantic schema definitions for API payloads.

Each domain (exercises, workouts, schedules) defines its model and an
explicit ``validate_*`` function.  The models only describe the shape
of the JSON documents; business constraints such as non‑empty names
are checked by the validation functions, which return an ordered list
of violation messages instead of raising.
"""
