from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging

from app.config.settings import settings
from app.core.exceptions import SupplySightError, ValidationError
from app.shared.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response


def setup_exception_handlers(app: FastAPI):
    """Translate domain and request-validation errors into ErrorResponse bodies"""

    @app.exception_handler(SupplySightError)
    async def supplysight_error_handler(request: Request, exc: SupplySightError):
        logger.warning(
            f"{request.method} {request.url.path} - {exc.error_code}: {exc.message}"
        )
        body = ErrorResponse(
            message=exc.message,
            error_code=exc.error_code,
            details=exc.details
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(mode="json")
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # mismo cuerpo que ValidationError del dominio
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.warning(
            f"{request.method} {request.url.path} - validation_error: {message}"
        )
        body = ErrorResponse(
            message=message,
            error_code=ValidationError.error_code,
            details={"errors": errors}
        )
        return JSONResponse(
            status_code=ValidationError.status_code,
            content=body.model_dump(mode="json")
        )
