import logging
from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def not_found(entity: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} not found"
    )


def internal_error(action: str) -> HTTPException:
    """Log the exception being handled and hide its details from the client.

    Only call from inside an ``except`` block.
    """
    logger.exception("Failed to %s", action)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}"
    )
