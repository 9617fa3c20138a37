"""View rendering"""

from sendly_verify.views.page_renderer import INDEX_PAGE, VERIFY_PAGE, PageRenderer

__all__ = ["INDEX_PAGE", "VERIFY_PAGE", "PageRenderer"]
