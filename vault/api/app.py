"""FastAPI application for the password vault service."""

import logging
import threading
from typing import List, Optional
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from shared.config.config import config
from shared.domain.consts import ErrorMessages, HealthStatus
from shared.domain.exceptions import PasswordNotFoundError
from shared.domain.models import PasswordCreatePayload, PasswordResponse
from shared.factories.repository_factory import create_repository
from shared.implementations.hashers import BcryptPasswordHasher
from vault.infrastructure.cache import PasswordCache
from vault.services.password_generator import validate_generation_params
from vault.services.password_service import PasswordService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_default_service() -> PasswordService:
    """Wire a PasswordService from configuration."""
    return PasswordService(
        repository=create_repository(),
        cache=PasswordCache(),
        hasher=BcryptPasswordHasher(),
    )


def get_password_service(request: Request) -> PasswordService:
    """Return the app's service, building it from configuration on first use."""
    state = request.app.state
    if state.password_service is None:
        with state.service_lock:
            if state.password_service is None:
                state.password_service = build_default_service()
    return state.password_service


router = APIRouter(prefix="/api/passwords", tags=["passwords"])


@router.get("/generate", response_class=PlainTextResponse)
def generate_password_endpoint(
    length: int,
    complexity: int,
    owner: str,
    tags: List[str] = Query(default=[]),
    service: PasswordService = Depends(get_password_service),
) -> str:
    """
    Generate a password and store it (hashed) for owner.

    Returns:
        Plain text message with the generated password. This is the only
        time the plaintext is returned.

    Raises:
        ValueError: If length or complexity is out of range (400 status).
    """
    validate_generation_params(length, complexity)
    password, record = service.generate_for_owner(length, complexity, owner, tags)
    logger.info(f"Generated and stored password {record.id} for owner {owner!r}")
    return f"Password for {owner}: {password}"


@router.get("", response_model=List[PasswordResponse])
def list_passwords(service: PasswordService = Depends(get_password_service)) -> List[PasswordResponse]:
    """Return all stored passwords."""
    return [PasswordResponse.from_record(record) for record in service.find_all()]


@router.get("/by-tag", response_model=List[PasswordResponse])
def list_passwords_by_tag(
    tag_name: str = Query(..., alias="tagName"),
    service: PasswordService = Depends(get_password_service),
) -> List[PasswordResponse]:
    """Return passwords carrying the given tag."""
    return [
        PasswordResponse.from_record(record)
        for record in service.find_passwords_by_tag_name(tag_name)
    ]


@router.get("/{password_id}", response_model=PasswordResponse)
def get_password(
    password_id: int,
    service: PasswordService = Depends(get_password_service),
) -> PasswordResponse:
    """
    Return a single password.

    Raises:
        HTTPException: If the password does not exist (404 status).
    """
    record = service.find_by_id(password_id)
    if record is None:
        raise HTTPException(
            status_code=404,
            detail=ErrorMessages.PASSWORD_NOT_FOUND.format(password_id=password_id),
        )
    return PasswordResponse.from_record(record)


@router.post("", response_model=PasswordResponse)
def create_password(
    payload: PasswordCreatePayload,
    service: PasswordService = Depends(get_password_service),
) -> PasswordResponse:
    """Create a password. The plaintext in the payload is hashed before storage."""
    return PasswordResponse.from_record(service.create(payload.to_record()))


@router.put("/{password_id}", response_model=PasswordResponse)
def update_password(
    password_id: int,
    payload: PasswordCreatePayload,
    service: PasswordService = Depends(get_password_service),
) -> PasswordResponse:
    """Replace a password's secret, owner and tags."""
    return PasswordResponse.from_record(service.update(payload.to_record(password_id)))


@router.delete("/{password_id}", status_code=204)
def delete_password(
    password_id: int,
    service: PasswordService = Depends(get_password_service),
) -> Response:
    """Delete a password. Unknown ids are ignored."""
    service.delete(password_id)
    return Response(status_code=204)


async def _handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _handle_not_found(request: Request, exc: PasswordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unexpected error handling {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": ErrorMessages.INTERNAL_ERROR})


def create_app(service: Optional[PasswordService] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        service: Service to serve requests with. When omitted, one is built
            from configuration on the first request.
    """
    app = FastAPI(title="Password Vault Service")
    app.state.password_service = service
    app.state.service_lock = threading.Lock()

    @app.get("/health")
    async def health_check() -> dict:
        """
        Health check endpoint for Docker healthchecks.

        Returns:
            Dict with status "ok" if service is healthy.
        """
        return {"status": HealthStatus.OK}

    app.include_router(router)
    app.add_exception_handler(PasswordNotFoundError, _handle_not_found)
    app.add_exception_handler(ValueError, _handle_value_error)
    app.add_exception_handler(Exception, _handle_unexpected)
    return app


app = create_app()
