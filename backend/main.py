# backend/main.py
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from database import engine, init_db
from utils.basic_auth import require_basic_auth
from utils.errors import INTERNAL_ERROR_MESSAGE, InventoryError, InternalError, field_errors
from utils.ratelimit import rate_limit

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Router imports
from routes.products import router as products_router
from routes.stores import router as stores_router
from routes.stock import router as stock_router

# Initialization
init_db()


def check_database():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection established successfully.")
    except Exception:
        logger.exception("Unable to connect to the database")


@asynccontextmanager
async def lifespan(app: FastAPI):
    check_database()
    yield


# Rate limiting runs before authentication on every route
app = FastAPI(
    title="Bazaar Inventory API",
    version="1.0.0",
    dependencies=[Depends(rate_limit), Depends(require_basic_auth)],
    lifespan=lifespan,
)

# Writes are unbounded: an abandoned sync handler keeps running in its thread and could still commit
TIMEOUT_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def request_deadline(method: str):
    if method.upper() in TIMEOUT_METHODS:
        return settings.REQUEST_TIMEOUT_SECONDS
    return None


@app.middleware("http")
async def request_timeout(request: Request, call_next):
    deadline = request_deadline(request.method)
    if deadline is None:
        return await call_next(request)
    try:
        return await asyncio.wait_for(call_next(request), timeout=deadline)
    except asyncio.TimeoutError:
        logger.warning("Request %s %s timed out", request.method, request.url.path)
        return JSONResponse(status_code=504, content={"error": "Request timed out."})


# ---- ERROR HANDLERS ----

@app.exception_handler(InventoryError)
def handle_inventory_error(request: Request, exc: InventoryError):
    if isinstance(exc, InternalError):
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc.message,
                     exc_info=exc.__cause__ or exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"errors": field_errors(exc.errors())})


@app.exception_handler(StarletteHTTPException)
def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


# Router registration
app.include_router(products_router)
app.include_router(stores_router)
app.include_router(stock_router)


@app.get("/")
def read_root():
    return {
        "message": "Welcome to Bazaar API",
        "endpoints": {
            "products": "/products",
            "stores": "/stores",
            "inventory": "/stores/{storeId}/inventory",
            "stockMovements": "/stores/{storeId}/stock-movements",
            "movementHistory": "/stock-movements",
        },
    }
