"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works
against the ``RecordStore`` interface, so API handlers never depend on
a particular database.
"""
