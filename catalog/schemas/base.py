"""
Base View Model

Every page is described by a view model: a pydantic model whose fields are
exactly the data the template receives, plus the template name as a class
variable. Handlers build a view model and hand it to the renderer.
"""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class View(BaseModel):
    """Base class for all page view models."""

    template: ClassVar[str]

    title: str = Field(..., description="Page heading and <title>")

    # ORM instances are passed straight through to the templates
    model_config = ConfigDict(arbitrary_types_allowed=True)

    def context(self) -> Dict[str, Any]:
        """Template variables (shallow, ORM objects are kept as-is)."""
        return dict(self)


class ErrorView(View):
    """Error page for 404s, store failures and anything unhandled."""

    template: ClassVar[str] = "error.html"

    status_code: int = Field(..., description="HTTP status of the response")
    message: str = Field(..., description="Message shown to the user")
    detail: Optional[str] = Field(
        default=None,
        description="Extra diagnostic text, only filled in debug mode",
    )
