import json
import logging
from pathlib import Path

from fastapi import APIRouter, Request, status
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

from core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

SWAGGER_UI_VERSION = "4.5.0"
SWAGGER_UI_CDN = f"https://cdnjs.cloudflare.com/ajax/libs/swagger-ui/{SWAGGER_UI_VERSION}"


@router.get("/swagger", include_in_schema=False)
def get_swagger(request: Request):
    """Raw OpenAPI document: the configured file if any, else the generated one"""
    if not settings.swagger_file:
        return JSONResponse(request.app.openapi())

    try:
        contents = Path(settings.swagger_file).read_text(encoding="utf-8")
        return JSONResponse(json.loads(contents))
    except (OSError, ValueError) as e:
        logger.error("Cannot read %s: %s", settings.swagger_file, e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Cannot read file swagger.json", "details": str(e)},
        )


@router.get("/docs", include_in_schema=False, response_class=HTMLResponse)
def get_docs():
    """Swagger UI pointed at /swagger"""
    return get_swagger_ui_html(
        openapi_url="/swagger",
        title="Cocktail API - Swagger Docs",
        swagger_js_url=f"{SWAGGER_UI_CDN}/swagger-ui-bundle.min.js",
        swagger_css_url=f"{SWAGGER_UI_CDN}/swagger-ui.min.css",
    )
