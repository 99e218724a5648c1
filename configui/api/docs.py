"""
Swagger UI documentation endpoints.
"""
from fastapi import APIRouter, Request, status
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from configui.core.config import Settings
from configui.core.exceptions import NotFoundError


def create_docs_router(settings: Settings) -> APIRouter:
    """
    Build the router serving the API browser under ``SWAGGER_PATH``.

    - ``{path}/index.html`` serves the Swagger UI page
    - ``{path}/doc.json`` serves the generated OpenAPI document
    - ``{path}`` and ``{path}/`` redirect to the index page

    The Swagger UI bundle and stylesheet are not served from here; the index
    page loads them from ``SWAGGER_CDN_URL``, so any other asset path is a 404.
    """
    base = settings.SWAGGER_PATH
    index_url = f"{base}/index.html"
    doc_url = f"{base}/doc.json"
    cdn = settings.SWAGGER_CDN_URL.rstrip("/")

    router = APIRouter(include_in_schema=False)

    @router.get(base)
    async def swagger_root():
        return RedirectResponse(index_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)

    @router.get(base + "/{asset:path}")
    async def swagger_asset(asset: str, request: Request):
        """
        Serve one documentation asset.
        """
        if asset in ("", "/"):
            return RedirectResponse(index_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)

        if asset == "index.html":
            page: HTMLResponse = get_swagger_ui_html(
                openapi_url=doc_url,
                title=f"{settings.PROJECT_NAME} - API Documentation",
                swagger_js_url=f"{cdn}/swagger-ui-bundle.js",
                swagger_css_url=f"{cdn}/swagger-ui.css",
            )
            return page

        if asset == "doc.json":
            return JSONResponse(request.app.openapi())

        raise NotFoundError(f"No documentation asset at {base}/{asset}")

    return router
