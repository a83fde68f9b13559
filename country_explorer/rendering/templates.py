"""Template rendering for HTML pages and terminal output using Jinja2.

Templates live in the country_explorer.rendering ``templates`` package
directory. Undefined variables raise, so a template/context mismatch fails
loudly instead of rendering blanks.
"""

import logging
from typing import Any, Dict

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

logger = logging.getLogger(__name__)

APP_TITLE = "Global Country Explorer"


class TemplateRenderingError(Exception):
    """A template failed to load or render."""


class TemplateRenderer:
    """Renders named templates from the package template directory.

    Two environments share one loader: HTML templates (``*.html.j2``) are
    autoescaped, text templates (``*.txt.j2``) are not. Compiled templates
    are cached by Jinja2 for reuse across requests.
    """

    def __init__(self, template_dir: str = "templates"):
        loader = PackageLoader("country_explorer.rendering", template_dir)
        self.html_env = Environment(
            loader=loader,
            autoescape=True,
            undefined=StrictUndefined,
        )
        self.text_env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        logger.debug(f"Initialized TemplateRenderer with templates from {template_dir}")

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render ``template_name`` with ``context``.

        Raises:
            TemplateRenderingError: If the template is missing or rendering fails
        """
        env = self.html_env if template_name.endswith(".html.j2") else self.text_env
        try:
            return env.get_template(template_name).render(context)
        except TemplateError as e:
            error_msg = f"Template rendering failed for {template_name}: {e}"
            logger.error(error_msg, exc_info=True)
            raise TemplateRenderingError(error_msg) from e

    def render_page(self, template_name: str, **context: Any) -> str:
        """Render an HTML page, filling in the defaults every page layout expects."""
        page_context: Dict[str, Any] = {
            "title": APP_TITLE,
            "current_page": "home",
            "countries": [],
            "error": None,
            "search_performed": False,
            "search": {"country": "", "capital": "", "region": ""},
            "contact_success": None,
        }
        page_context.update(context)
        return self.render(template_name, page_context)
