"""
Storefront - Main FastAPI Application

Single entry point for the catalog, cart and checkout API.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.catalog import get_catalog
from storefront.logging import get_logger
from storefront.routers import webapp_router
from storefront.routers.deps import get_session_registry, reset_session_registry

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    get_catalog()
    yield
    # Shutdown: sessions are not persisted
    logger.info(f"Shutting down, discarding {len(get_session_registry())} sessions")
    reset_session_registry()


app = FastAPI(
    title="Storefront",
    description="Product catalog, shopping cart and promo codes",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(webapp_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront"}
