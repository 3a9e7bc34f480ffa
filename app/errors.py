# app/errors.py

import logging

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Raised by a repository when the requested row does not exist."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


def not_found_handler(request: Request, exc: NotFoundError):
    return Response(status_code=404)


def integrity_error_handler(request: Request, exc: IntegrityError):
    # FK / NOT NULL violations come from the store, not from request validation
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=400,
        content={"detail": "Constraint violation: referenced row missing or required field empty"},
    )
