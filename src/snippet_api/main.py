"""FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from common.cli_helpers import setup_logging
from common.config import UploaderConfig, load_config, set_config
from extract_fields.snippet import PhotoLoader
from snippet_api.routers import snippets
from snippet_catalog.catalog import SnippetCatalog
from snippet_catalog.photos import S3PhotoLoader

logger = logging.getLogger(__name__)


def create_app(
    catalog: Optional[SnippetCatalog] = None,
    photo_loader: Optional[PhotoLoader] = None,
) -> FastAPI:
    """Build the API around an already constructed catalog and photo loader."""
    app = FastAPI(
        title="Snippet Uploader",
        description="Validate InDesign snippets and list stories ready for upload",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.catalog = catalog
    app.state.photo_loader = photo_loader

    app.include_router(snippets.router)

    @app.get("/")
    async def root():
        """API root - returns basic info."""
        return {
            "name": "Snippet Uploader",
            "version": "1.0.0",
            "docs": "/docs",
        }

    return app


def serve(config: UploaderConfig) -> None:
    """Start the catalog refresher and run the API server until interrupted."""
    import uvicorn

    set_config(config)

    photo_loader = None
    catalog = None
    if config.store.bucket:
        photo_loader = S3PhotoLoader.from_config(config.store)
        catalog = SnippetCatalog.from_config(config, photo_loader=photo_loader)
        catalog.start()
    else:
        logger.warning("S3_BUCKET_NAME is not set; /available-stories is disabled")

    app = create_app(catalog=catalog, photo_loader=photo_loader)
    logger.info("Server listening on %s:%d", config.server.host, config.server.port)
    try:
        uvicorn.run(app, host=config.server.host, port=config.server.port)
    finally:
        if catalog is not None:
            catalog.stop(timeout=5)


def main() -> None:
    """Run the API server with the default configuration."""
    setup_logging()
    serve(load_config())


if __name__ == "__main__":
    main()
