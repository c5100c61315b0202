"""
Core infrastructure: configuration, logging, errors, dates and the
SQLite connection and migrations.
"""
