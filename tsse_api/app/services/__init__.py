"""
Service layer abstraction.

Each service encapsulates the business rules for a domain on top of a
repository.  Services do not raise for business outcomes: every
operation returns a ``ServiceResult`` carrying either the value or a
``ServiceError`` that the API layer maps to an HTTP response.
"""
