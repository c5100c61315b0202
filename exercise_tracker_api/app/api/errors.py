"""
Translation of service errors into HTTP responses.

Every endpoint funnels its failures through ``raise_http_error`` so
that clients always see the same status codes and messages:

* ``NotFoundError`` -> 404 ``could not find user``
* ``ValidationError`` -> 400 with the validation message
* anything else -> 500 ``there was an error`` (details are only logged)
"""

import logging
from typing import NoReturn

from fastapi import HTTPException, status

from ..core.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "could not find user"
GENERIC_ERROR = "there was an error"


def raise_http_error(exc: Exception) -> NoReturn:
    if isinstance(exc, HTTPException):
        raise exc
    if isinstance(exc, NotFoundError):
        logger.info("Not found: %s", exc)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND) from exc
    if isinstance(exc, ValidationError):
        logger.info("Rejected input: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    logger.error("Request failed", exc_info=exc)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_ERROR) from exc
