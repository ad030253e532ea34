"""Domain layer: errors and schemas."""

from .errors import (
    ErrorCodes,
    FileAccessError,
    PageError,
    RenderError,
    TemplateNotFoundError,
)
from .schemas import (
    PLAIN_HTML_PROFILE,
    Document,
    Page,
    RenderedFragment,
    RenderingProfile,
)

__all__ = [
    "ErrorCodes",
    "PageError",
    "FileAccessError",
    "TemplateNotFoundError",
    "RenderError",
    "Document",
    "RenderedFragment",
    "Page",
    "RenderingProfile",
    "PLAIN_HTML_PROFILE",
]
