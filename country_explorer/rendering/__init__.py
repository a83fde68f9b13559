"""Jinja2 rendering for web pages and CLI output."""

from .templates import APP_TITLE, TemplateRenderer, TemplateRenderingError

__all__ = ["APP_TITLE", "TemplateRenderer", "TemplateRenderingError"]
