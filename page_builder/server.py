"""
Page Builder Server
====================

FastAPI server for the drag-and-drop page builder.

Features:
- Palette of draggable element kinds
- Canvas sessions with drop, reorder and selection events
- Property editor for content and style of the selected element
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Import canvas manager
from .canvas.state_manager import StateManager
from .models.canvas_models import DEFAULT_STYLE, ELEMENT_TYPES
from .models.style_models import PIXEL_PROPERTIES, STYLE_PROPERTIES

# Import API routers
from .api import canvas_routes, element_routes, palette_routes


# Shared service instances
state_manager: StateManager = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global state_manager

    logger.info("[PAGE-BUILDER] Starting up...")

    state_manager = StateManager()

    # Inject into route modules
    canvas_routes.state_manager = state_manager

    logger.info("[PAGE-BUILDER] Services initialized")

    yield

    logger.info(
        f"[PAGE-BUILDER] Shutting down, discarding {state_manager.session_count()} session(s)"
    )
    canvas_routes.state_manager = None


# Create FastAPI app
app = FastAPI(
    title="Page Builder",
    description="Drag-and-drop page builder with a property editor",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(palette_routes.router)
app.include_router(canvas_routes.router)
app.include_router(element_routes.router)


@app.get("/")
async def root():
    """Return API info."""
    return {
        "service": "Page Builder",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "palette": "/api/palette",
            "canvas": "/api/canvas/state/{session_id}",
            "editor": "/api/element/{session_id}/panel"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "page-builder",
        "sessions": state_manager.session_count() if state_manager else 0
    }


@app.get("/api/info")
async def api_info():
    """Get element kinds and editable style properties."""
    return {
        "service": "Page Builder",
        "version": "1.0.0",
        "element_types": [kind.value for kind in ELEMENT_TYPES],
        "default_style": DEFAULT_STYLE,
        "pixel_properties": sorted(PIXEL_PROPERTIES),
        "style_properties": [prop.model_dump(mode="json") for prop in STYLE_PROPERTIES]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "page_builder.server:app",
        host=os.getenv("PAGE_BUILDER_HOST", "0.0.0.0"),
        port=int(os.getenv("PAGE_BUILDER_PORT", "8080")),
        reload=True
    )
