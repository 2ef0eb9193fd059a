"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fitquest.api.characters import router as characters_router
from fitquest.api.serializers import quest_update_to_dict
from fitquest.app_logging import configure_logging
from fitquest.containers import AppContainer
from fitquest.domain.errors import (
    FitQuestError,
    InvalidInputError,
    NotFoundError,
    PartialFailureError,
)

_STATUS_BY_ERROR: dict[type[FitQuestError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    PartialFailureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="FitQuest")
    app.state.container = container

    app.include_router(characters_router)

    @app.exception_handler(FitQuestError)
    async def handle_domain_error(request: Request, exc: FitQuestError) -> JSONResponse:
        status_code = _STATUS_BY_ERROR.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        detail: dict[str, object] = {"message": str(exc), "code": exc.code}
        if isinstance(exc, PartialFailureError):
            logger.error("Partial quest update on %s", request.url.path)
            detail["details"] = {
                "committed": [quest_update_to_dict(r) for r in exc.results],
                "failed_quest_ids": [str(quest_id) for quest_id in exc.failures],
            }
        return JSONResponse(status_code=status_code, content={"detail": detail})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
