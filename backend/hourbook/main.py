import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hourbook.api.calculator import router as calculator_router
from hourbook.api.settings import router as settings_router
from hourbook.api.weekly_logs import router as weekly_logs_router
from hourbook.core.config import settings
from hourbook.core.errors import HourbookError, StorageError
from hourbook.db import Base, engine
from hourbook.models.setting import Setting  # noqa: F401  (import ensures table is registered)
from hourbook.models.weekly_log import WeeklyLog  # noqa: F401

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


app = FastAPI(title="Hourbook")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (settings, weekly_logs) on startup
Base.metadata.create_all(bind=engine)


@app.exception_handler(HourbookError)
async def hourbook_error_handler(request: Request, exc: HourbookError):
    if isinstance(exc, StorageError):
        log.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{where}: {first.get('msg')}" if where else first.get("msg", message)
    log.info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


app.include_router(settings_router)
app.include_router(weekly_logs_router)
app.include_router(calculator_router)


@app.get("/")
def root():
    return {"message": "Hourbook backend is running"}
