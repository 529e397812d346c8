"""Jinja2 results renderer adapter."""

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup, escape

from safequote.application.dtos.vehicle import VehicleCard
from safequote.application.ports.results_renderer import ResultsRenderer
from safequote.application.use_cases.user_messages_en import UserMessagesEN

TEMPLATES_DIR = Path(__file__).parent / "templates"

# markupsafe's numeric quote entities, rewritten to the ones the theme's markup emits
_QUOTE_ENTITIES = (("&#39;", "&#039;"), ("&#34;", "&quot;"))


def escape_html(value: Any) -> Markup:
    """
    Escape a value for insertion into markup.

    Installed as the environment's finalize hook, so every `{{ }}` expression
    goes through it; values that are already Markup pass unchanged.

    Args:
        value: Any template value

    Returns:
        Escaped markup
    """
    if isinstance(value, Markup):
        return value
    if value is None:
        return Markup("")
    escaped = str(escape(value))
    for numeric, named in _QUOTE_ENTITIES:
        escaped = escaped.replace(numeric, named)
    return Markup(escaped)


def create_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    """Build the template environment used for result fragments."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=True,
        finalize=escape_html,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class JinjaResultsRenderer(ResultsRenderer):
    """Renders vehicle cards from the vehicle_results.html template."""

    TEMPLATE_NAME = "vehicle_results.html"

    def __init__(self, environment: Optional[Environment] = None) -> None:
        """
        Initialize renderer.

        Args:
            environment: Optional Jinja2 environment (defaults to package templates)
        """
        self._environment = environment or create_environment()

    def render(self, cards: list[VehicleCard]) -> str:
        """
        Render the results area.

        Args:
            cards: Vehicle cards in display order

        Returns:
            Markup string
        """
        template = self._environment.get_template(self.TEMPLATE_NAME)
        return template.render(cards=cards, messages=UserMessagesEN)
