"""
View Rendering

Handlers never touch templates directly: they build a view model and pass
it to a ViewRenderer. The default renderer uses Jinja2 templates shipped in
catalog/templates/.
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Protocol

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from catalog.config import get_settings
from catalog.schemas import View

TEMPLATES_DIR = Path(__file__).parent / "templates"


class ViewRenderer(Protocol):
    def render(self, request: Request, view: View, status_code: int = 200) -> Response:
        ...


class TemplateRenderer:
    """Renders view models with Jinja2 (autoescaping enabled)."""

    def __init__(self, directory: Path = TEMPLATES_DIR):
        self.templates = Jinja2Templates(directory=str(directory))
        self.templates.env.globals["app_name"] = get_settings().app_name

    def render(self, request: Request, view: View, status_code: int = 200) -> Response:
        return self.templates.TemplateResponse(
            request,
            view.template,
            view.context(),
            status_code=status_code,
        )


@lru_cache
def get_renderer() -> ViewRenderer:
    return TemplateRenderer()


Renderer = Annotated[ViewRenderer, Depends(get_renderer)]
