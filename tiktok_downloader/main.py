import uuid
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from tiktok_downloader.api import health, download
from tiktok_downloader.config.settings import config
from tiktok_downloader.core.errors import ErrorKind, ServiceError, error_response
from tiktok_downloader.core.logging import log_warning, setup_logging
from tiktok_downloader.infra.http import init_http_client, close_http_client
from tiktok_downloader.utils.locale import get_locale

setup_logging()

app = FastAPI(
    title=config.api.title,
    description=config.api.description,
    version=config.api.version,
    docs_url="/docs" if config.api.debug else None,
    redoc_url=None
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api.cors_origins,
    allow_credentials=False,
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

@app.middleware("http")
async def request_context(request: Request, call_next):
    request.state.request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    response = await call_next(request)
    response.headers["X-Request-ID"] = request.state.request_id
    return response

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    log_warning(request, f"Rejected request body: {exc.errors()}")
    locale = get_locale(request.headers.get("accept-language"))
    return error_response(
        ServiceError(
            kind=ErrorKind.INVALID_INPUT,
            message_key="error.invalid_request",
            details="; ".join(str(err.get("msg")) for err in exc.errors())
        ),
        locale
    )

# Routes
app.include_router(health.router, tags=["Health"])
app.include_router(download.router, tags=["Download"])

@app.on_event("startup")
async def startup_event():
    await init_http_client()

@app.on_event("shutdown")
async def shutdown_event():
    await close_http_client()
