"""
API package.

``router.py`` exposes a single ``router`` that includes the endpoint
modules from ``endpoints``; ``main.create_app`` mounts it under
``/api``.
"""
