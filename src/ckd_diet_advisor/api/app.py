"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ckd_diet_advisor.api.foods import router as foods_router
from ckd_diet_advisor.api.profiles import router as profiles_router
from ckd_diet_advisor.app_logging import configure_logging
from ckd_diet_advisor.containers import AppContainer
from ckd_diet_advisor.domain.errors import NotFoundError, ValidationError
from ckd_diet_advisor.domain.profiles import validation_error_from


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="CKD Diet Advisor")
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(profiles_router)

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message}
        )

    @app.exception_handler(ValidationError)
    async def invalid_input(_request: Request, exc: ValidationError) -> JSONResponse:
        return _validation_response(exc)

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = validation_error_from(list(exc.errors()))
        logger.info(
            "Rejected %s %s: field=%s", request.method, request.url.path, error.field
        )
        return _validation_response(error)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _validation_response(error: ValidationError) -> JSONResponse:
    content: dict[str, str] = {"message": error.message}
    if error.field:
        content["field"] = error.field
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)
