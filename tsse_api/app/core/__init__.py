"""
Core infrastructure: configuration, logging, SQLite access and security.
"""
