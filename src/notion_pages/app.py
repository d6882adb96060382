"""FastAPI application with lifespan, health endpoint, and page descriptions."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from notion_client import errors as notion_errors

from notion_pages.config import get_settings
from notion_pages.errors import MetaDateError, PageRetrievalError, PageValidationError
from notion_pages.logging_config import configure_logging
from notion_pages.models.page import PageDescription
from notion_pages.notion.assembler import load_page
from notion_pages.notion.client import get_notion_client
from notion_pages.notion.loader import LoggingReporter, NotionApiLoader


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    configure_logging()
    settings = get_settings()
    app.state.settings = settings
    yield


app = FastAPI(
    title="Notion Pages",
    lifespan=lifespan,
)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "notion-pages",
        "version": "0.1.0",
    }


@app.get("/pages/{page_id}", response_model=PageDescription)
async def page_endpoint(page_id: str, index: int = Query(default=0, ge=0)):
    """Describe a single page, loading it fresh from Notion.

    Missing blocks map to 404, a non-page id or invalid metadata date to 422,
    and Notion API failures to 502.
    """
    loader = NotionApiLoader(await get_notion_client())
    try:
        return await load_page(page_id, page_id, index, loader, LoggingReporter())
    except PageRetrievalError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (PageValidationError, MetaDateError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except notion_errors.APIResponseError as exc:
        raise HTTPException(status_code=502, detail=f"Notion API error: {exc}") from exc
