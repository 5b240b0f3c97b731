"""FastAPI application serving the catalog parser."""

from fastapi import FastAPI

from catalogtree.utils.logging_config import configure_logging
from server.routers.catalog import router as catalog_router

configure_logging()

app = FastAPI(title="catalogtree", description="Parse indentation-based catalogs into trees.")
app.include_router(catalog_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
