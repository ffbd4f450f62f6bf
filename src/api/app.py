from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning("Client error on %s %s: %s", request.method, request.url.path, exc.base_error)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def handle_server_error(request: Request, exc: ServerError):
    logger.error("Server error on %s %s: %s", request.method, request.url.path, exc.base_error)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Agency Service API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        agency,
        health_check,
        invitation,
        notification,
        sidebar,
        sub_account,
        user,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(user.router, tags=["User"])
    app.include_router(agency.router, tags=["Agency"])
    app.include_router(sub_account.router, tags=["SubAccount"])
    app.include_router(invitation.router, tags=["Invitations"])
    app.include_router(notification.router, tags=["Activity"])
    app.include_router(sidebar.router, tags=["Navigation"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
