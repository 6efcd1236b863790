# main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clients.employee_client import EmployeeApiClient
from config import Settings, get_settings
from database import MongoConnection
from routers import employee_router, pages_router
from services.employee_store import EmployeeStore
from utils.errors import GENERIC_CREATE_MESSAGE, EmployeeDirectoryError, ErrorKind, error_response

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[EmployeeStore] = None) -> FastAPI:
    """
    Build the application.

    The store and the API client used by the pages are created in the lifespan
    unless they were already placed on `app.state` (tests do this).
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        connection = None
        owned_client = None
        if app.state.employee_store is None:
            connection = MongoConnection(settings)
            app.state.employee_store = EmployeeStore(connection.get_employee_collection())
        await app.state.employee_store.ensure_indexes()

        if getattr(app.state, "api_client", None) is None:
            owned_client = EmployeeApiClient(httpx.AsyncClient(base_url=settings.API_BASE_URL))
            app.state.api_client = owned_client
        logger.info("Startup complete.")

        yield

        if owned_client is not None:
            await owned_client.aclose()
        if connection is not None:
            connection.close()

    app = FastAPI(title="Employee Directory", lifespan=lifespan)
    app.state.settings = settings
    app.state.employee_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Adjust as needed for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(EmployeeDirectoryError)
    async def employee_error_handler(request: Request, exc: EmployeeDirectoryError):
        status_code, message = error_response(
            exc.kind,
            duplicate_mode=settings.DUPLICATE_EMAIL_MODE,
            message=str(exc) if exc.kind is ErrorKind.VALIDATION else None,
            generic_message=exc.public_message or GENERIC_CREATE_MESSAGE,
        )
        return JSONResponse(status_code=status_code, content={"success": False, "message": message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = ", ".join(f"{'.'.join(str(p) for p in err['loc'][1:])}: {err['msg']}" for err in exc.errors())
        return JSONResponse(status_code=400, content={"success": False, "message": message})

    app.include_router(employee_router.router)
    app.include_router(pages_router.router)

    @app.get("/")
    def read_root():
        return {"message": "Welcome to the Employee Directory"}

    return app


app = create_app()
