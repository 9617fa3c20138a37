"""HTML page loading for the view routes."""

from collections.abc import Mapping
from pathlib import Path

from jinja2 import BaseLoader, DictLoader, Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from sendly_verify.exceptions import StaticAssetMissing
from sendly_verify.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

INDEX_PAGE = "index.html"
VERIFY_PAGE = "verify.html"


class PageRenderer:
    """Fetches HTML pages by name from a Jinja2 loader.

    Use `from_directory` for the bundled templates and `from_mapping`
    for an in-memory page table.
    """

    def __init__(self, loader: BaseLoader):
        self._env = Environment(loader=loader, autoescape=select_autoescape(["html"]))

    @classmethod
    def from_directory(cls, directory: Path) -> "PageRenderer":
        return cls(FileSystemLoader(str(directory)))

    @classmethod
    def from_mapping(cls, pages: Mapping[str, str]) -> "PageRenderer":
        return cls(DictLoader(dict(pages)))

    def render(self, name: str) -> str:
        """Render page `name`.

        Raises:
            StaticAssetMissing: If the loader has no page with that name
        """
        try:
            template = self._env.get_template(name)
        except TemplateNotFound as e:
            log_with_context(
                logger,
                "error",
                "Page not found",
                page=name,
                event_type="page_missing",
            )
            raise StaticAssetMissing(name) from e
        return template.render()
