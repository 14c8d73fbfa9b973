"""
HTTP layer.

``router`` aggregates the domain routers mounted under the API prefix,
``deps`` hands out the services built by ``create_app`` and ``errors``
owns the mapping from service errors to HTTP responses.
"""
