"""Module building the FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from textorigin.api.router import lifespan
from textorigin.api.router import router as main_router
from textorigin.configuration import config

description = """
**Text Origin** estimates whether a text was written by AI or a human.

## How does it work?

- **Burstiness**: humans vary the length of their sentences, LLMs rarely do.
- **Vocabulary richness**: LLM-written texts repeat the same words more often.
- **Buzzwords**: generic phrases such as *leveraged* or *spearheaded*.

No language model is involved, so every verdict comes with its evidence.
"""


def create_app() -> FastAPI:
    """
    Create the application serving the Web API.

    Returns:
        FastAPI: The application with all endpoints mounted under `/v1`.
    """
    fastapi_app = FastAPI(
        title=config.project_name,
        summary="Heuristic detection of AI-written texts.",
        description=description,
        lifespan=lifespan,
        docs_url="/v1/docs",
        openapi_url="/v1/openapi.json",
        redoc_url="/v1/redoc",
    )
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @fastapi_app.get("/")
    async def root() -> RedirectResponse:
        """Redirect root to docs."""
        return RedirectResponse(url="/v1/docs")

    @fastapi_app.get("/v1")
    async def root_v1() -> RedirectResponse:
        """Redirect /v1 to docs."""
        return RedirectResponse(url="/v1/docs")

    fastapi_app.include_router(main_router, prefix="/v1")
    return fastapi_app
