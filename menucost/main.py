from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from sqlalchemy.exc import IntegrityError
import logging

from menucost.api import router as api_router
from menucost.config import settings
from menucost.core.errors import MenuCostError
from menucost.db import create_db_and_tables

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
log = logging.getLogger(__name__)

app = FastAPI(
    title="Menu Cost API",
    version="1.0.0",
    description="Daily menu planning and per-capita cost reports for school cafeterias.",
)

# Session carries user_id set by the identity provider
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)


@app.exception_handler(MenuCostError)
async def menucost_error_handler(request: Request, exc: MenuCostError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    log.warning("integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": str(exc.orig)})


@app.on_event("startup")
async def on_startup():
    log.info("Starting DB setup...")
    await create_db_and_tables()
    log.info("DB schema created.")


app.include_router(api_router)
