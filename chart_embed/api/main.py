"""Sheets Chart Embed API.

Turns Google Sheets charts into responsive, animated embeds:
- Parse pasted iframe code into an embed draft
- Build, encode and decode render configs for shareable URLs
- Generate copy-paste snippets and live previews
- Serve the standalone embed page at /embed
- Fetch published sheets server-side for the charts builder

Environment variables:
    CHART_EMBED_PUBLIC_ORIGIN: Origin used in share URLs (default: request origin)
    SHEETS_FETCH_TIMEOUT: Sheets fetch timeout in seconds (default 15)
    SHEETS_ALLOWED_HOSTS: Hosts the sheets fetcher may contact (default docs.google.com)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chart_embed import __version__
from chart_embed.api.routes import catalog, configs, data, embed, parse, preview, sheets, snippets
from chart_embed.render_config.catalog_registry import get_catalog_registry
from chart_embed.sheets.client import close_sheets_fetcher
from chart_embed.snippets.registry import get_template_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Pre-load registries
    logger.info("Loading catalog definitions...")
    catalog_registry = get_catalog_registry()
    logger.info(f"Loaded {catalog_registry.count()} chart types")

    logger.info("Loading snippet templates...")
    template_registry = get_template_registry()
    logger.info(f"Loaded {template_registry.count()} templates")

    logger.info("Sheets Chart Embed API ready")
    yield
    # Shutdown
    logger.info("Shutting down Sheets Chart Embed API")
    await close_sheets_fetcher()


# Create FastAPI app
app = FastAPI(
    title="Sheets Chart Embed API",
    description="""
## Responsive, animated Google Sheets chart embeds

### Key Endpoints

- `POST /v1/parse` - Extract src/width/height from pasted iframe code
- `POST /v1/configs/build` - Build a render config from input and styling options
- `POST /v1/snippets` - Generate the copy-paste snippet for a config
- `POST /v1/preview` - Live preview page for a config
- `GET /v1/sheets/fetch?url=...` - Fetch a published sheet as CSV
- `GET /embed?c=...` - Standalone embed page for a shared config
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(parse.router, prefix="/v1")
app.include_router(configs.router, prefix="/v1")
app.include_router(snippets.router, prefix="/v1")
app.include_router(preview.router, prefix="/v1")
app.include_router(data.router, prefix="/v1")
app.include_router(sheets.router, prefix="/v1")
app.include_router(catalog.router, prefix="/v1")
app.include_router(embed.router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Sheets Chart Embed API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "parse": "/v1/parse",
            "configs": "/v1/configs",
            "snippets": "/v1/snippets",
            "preview": "/v1/preview",
            "data": "/v1/data/parse",
            "sheets": "/v1/sheets/fetch",
            "catalog": "/v1/catalog",
            "embed": "/embed",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "chart_types_loaded": get_catalog_registry().count(),
        "templates_loaded": get_template_registry().count(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chart_embed.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
