from fastapi import FastAPI
from sanctum_link.logging_config import setup_logging

# configure before any module binds its logger
setup_logging()

from sanctum_link.routers import health, pipeline  # noqa: E402

app = FastAPI(title="Sanctum Link Functions Gateway")

app.include_router(pipeline.router, prefix="/api/v1")
app.include_router(health.router, prefix="/api/v1")
