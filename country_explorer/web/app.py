"""FastAPI application: search page, JSON detail endpoint, about page."""

from __future__ import annotations

from typing import Optional
from uuid import uuid4

from fastapi import FastAPI, Form, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from country_explorer.config.models import AppConfig
from country_explorer.fetcher.factory import get_fetcher
from country_explorer.logging import get_logger
from country_explorer.logging.context import log_context
from country_explorer.lookup.service import CountryLookupService
from country_explorer.rendering.templates import APP_TITLE, TemplateRenderer

logger = get_logger(__name__, component="web")

PAGE_NOT_FOUND_MESSAGE = "The page you are looking for does not exist."
SERVER_ERROR_MESSAGE = "Something went wrong on our end. Please try again later."
COUNTRY_NOT_FOUND_MESSAGE = "Country not found"
DETAIL_FAILED_MESSAGE = "Failed to fetch country details"
CONTACT_THANKS_MESSAGE = "Thank you for your message! We will get back to you soon."


def create_app(service: CountryLookupService, renderer: Optional[TemplateRenderer] = None) -> FastAPI:
    """Build the web app around an already-configured lookup service."""
    renderer = renderer or TemplateRenderer()
    app = FastAPI(title="global-country-explorer", version="1.0")
    app.state.service = service
    app.state.renderer = renderer

    @app.middleware("http")
    async def request_log_context(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        # The error handler runs outside this context, so it reads the id from here
        request.state.request_id = request_id
        with log_context(request_id=request_id, path=request.url.path):
            response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        return HTMLResponse(renderer.render_page("index.html.j2"))

    def render_search(country: str, capital: str, region: str) -> HTMLResponse:
        outcome = service.search_form(country=country, capital=capital, region=region)
        page = renderer.render_page(
            "index.html.j2",
            countries=outcome.records,
            error=outcome.error,
            search_performed=outcome.searched,
            search={"country": country, "capital": capital, "region": region},
        )
        return HTMLResponse(page)

    @app.get("/search", response_class=HTMLResponse)
    def search(country: str = "", capital: str = "", region: str = "") -> HTMLResponse:
        return render_search(country, capital, region)

    @app.post("/search", response_class=HTMLResponse)
    def search_submit(
        countrySearch: str = Form(""),
        capitalSearch: str = Form(""),
        regionSearch: str = Form(""),
    ) -> HTMLResponse:
        return render_search(countrySearch, capitalSearch, regionSearch)

    @app.get("/view/{country_name}")
    def view(country_name: str) -> JSONResponse:
        try:
            record = service.view(country_name)
        except Exception as e:
            logger.error(
                f"Detail lookup failed: {e}",
                extra={
                    "event": "web.view.failed",
                    "country_name": country_name,
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )
            return JSONResponse(status_code=500, content={"error": DETAIL_FAILED_MESSAGE})

        if record is None:
            return JSONResponse(status_code=404, content={"error": COUNTRY_NOT_FOUND_MESSAGE})

        return JSONResponse(content={"success": True, "country": record.to_api_dict()})

    @app.get("/about", response_class=HTMLResponse)
    def about() -> HTMLResponse:
        return HTMLResponse(
            renderer.render_page("about.html.j2", title=f"About - {APP_TITLE}", current_page="about")
        )

    @app.post("/contact", response_class=HTMLResponse)
    def contact(name: str = Form(""), email: str = Form(""), message: str = Form("")) -> HTMLResponse:
        logger.info(
            "Contact form submitted",
            extra={
                "event": "contact.submitted",
                "contact_name": name,
                "contact_email": email,
                "contact_message": message,
            },
        )
        return HTMLResponse(renderer.render_page("index.html.j2", contact_success=CONTACT_THANKS_MESSAGE))

    @app.exception_handler(StarletteHTTPException)
    async def not_found_page(request: Request, exc: StarletteHTTPException):
        if exc.status_code != 404:
            return await http_exception_handler(request, exc)
        return HTMLResponse(
            renderer.render_page("index.html.j2", error=PAGE_NOT_FOUND_MESSAGE),
            status_code=404,
        )

    @app.exception_handler(Exception)
    async def server_error_page(request: Request, exc: Exception):
        logger.error(
            "Unhandled error while serving request",
            extra={
                "event": "web.request.failed",
                "request_id": getattr(request.state, "request_id", None),
                "error_type": type(exc).__name__,
                "path": request.url.path,
            },
            exc_info=exc,
        )
        return HTMLResponse(
            renderer.render_page("index.html.j2", error=SERVER_ERROR_MESSAGE),
            status_code=500,
        )

    return app


def create_app_from_config(app_config: AppConfig) -> FastAPI:
    """Wire fetcher, lookup service and renderer from configuration."""
    fetcher = get_fetcher(app_config.http)
    return create_app(CountryLookupService(fetcher))
