"""
FastAPI application serving the development backend and the terminal session API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from webterm.api.routers import backend_router, terminal_router
from webterm.container import container


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Release the backend connections of the session transport
    await container.aclose()


# Create FastAPI app
app = FastAPI(title="Web Terminal API", lifespan=lifespan)
app.include_router(backend_router)
app.include_router(terminal_router)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
