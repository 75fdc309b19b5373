"""
FastAPI application for the repository explorer and issue table.

The frontend consumes these endpoints; all UI state (current page,
search term, selected issues) is carried by the client.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils.config_loader import load_config
from utils.logger import setup_logger

config = load_config()
logger = setup_logger(config.log_level, __name__)

# Create FastAPI app
app = FastAPI(
    title="Repo Explorer API",
    description="REST API for browsing popular GitHub repositories and a static issue table",
    version="1.0.0"
)

# Enable CORS so the frontend dev server can call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import and include routes
from backend.routes import router
app.include_router(router)

logger.info("FastAPI app initialized")
