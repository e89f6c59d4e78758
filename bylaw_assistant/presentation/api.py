"""HTTP API for bylaw search, verified answers and citation annotation."""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import Body, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bylaw_assistant.config.settings import settings
from bylaw_assistant.container import Container, configure_container
from bylaw_assistant.core.cache import CacheSweeper
from bylaw_assistant.core.models.search import SearchResponse
from bylaw_assistant.core.services.answer_service import AnswerService
from bylaw_assistant.core.services.citation_service import CitationService
from bylaw_assistant.core.services.search_service import SearchService

logger = logging.getLogger(__name__)

CACHE_CONTROL = "private, max-age=300"


class AnnotateRequest(BaseModel):
    text: str


def _search_response(response: SearchResponse) -> JSONResponse:
    headers = {"Cache-Control": CACHE_CONTROL} if response.success else None
    return JSONResponse(
        status_code=response.status, content=response.to_dict(), headers=headers
    )


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the API around a configured container.

    Args:
        container: Dependency container. Defaults to one configured from settings.

    Returns:
        FastAPI application.
    """
    c = container or configure_container(settings, Container())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sweeper = c.resolve(CacheSweeper)
        sweeper.start()
        logger.info("Bylaw API started")
        yield
        sweeper.stop()
        logger.info("Bylaw API stopped")

    app = FastAPI(title="Oak Bay Bylaw Assistant API", lifespan=lifespan)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        details = json.loads(json.dumps(exc.errors(), default=str))
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "Invalid request parameters", "details": details},
        )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/api/bylaws/search")
    def search(payload: Any = Body(default=None)):
        if not isinstance(payload, dict):
            return _search_response(
                SearchResponse.failed("Invalid search parameters", status=400)
            )
        return _search_response(c.resolve(SearchService).execute(payload))

    @app.get("/api/bylaws/search")
    def search_get(
        q: str = Query(default=""),
        bylaw: Optional[str] = Query(default=None),
        category: Optional[str] = Query(default=None),
        limit: int = Query(default=settings.search_default_limit),
    ):
        filters = {}
        if bylaw:
            filters["bylawNumber"] = bylaw
        if category:
            filters["category"] = category

        payload = {
            "query": q,
            "filters": filters,
            "limit": limit,
            "minScore": settings.search_default_min_score,
        }
        return _search_response(c.resolve(SearchService).execute(payload))

    @app.get("/api/bylaws/answers")
    def answers(topic: str = Query(..., min_length=1)):
        answer = c.resolve(AnswerService).lookup(topic)
        return {"success": True, "topic": topic, "answer": answer.to_dict()}

    @app.post("/api/bylaws/annotate")
    def annotate(request: AnnotateRequest):
        citation_service = c.resolve(CitationService)
        segments = [s.to_dict() for s in citation_service.annotate(request.text)]
        citations = sum(1 for s in segments if s["kind"] == "citation")
        return {"success": True, "citations": citations, "segments": segments}

    return app
