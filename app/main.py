# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError

from .config import CORS_ORIGIN, LOG_LEVEL
from .db import init_db
from .errors import NotFoundError, integrity_error_handler, not_found_handler
from .routers import barberos_routes, citas_routes, clientes_routes, servicios_routes

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Barberia API started (CORS origin: %s)", CORS_ORIGIN)
    yield


app = FastAPI(title="Barberia API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[CORS_ORIGIN],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.add_exception_handler(NotFoundError, not_found_handler)
app.add_exception_handler(IntegrityError, integrity_error_handler)

app.include_router(barberos_routes.router)
app.include_router(clientes_routes.router)
app.include_router(servicios_routes.router)
app.include_router(citas_routes.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
