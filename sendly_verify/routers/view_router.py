"""Page routes for serving the HTML front end."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from sendly_verify.dependencies import get_page_source
from sendly_verify.protocols import PageSource
from sendly_verify.views import INDEX_PAGE, VERIFY_PAGE

router = APIRouter()

# Pages are served regardless of method
PAGE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/", methods=PAGE_METHODS, response_class=HTMLResponse)
async def index(pages: PageSource = Depends(get_page_source)):
    """Render the phone number entry page."""
    return HTMLResponse(pages.render(INDEX_PAGE))


@router.api_route("/verify", methods=PAGE_METHODS, response_class=HTMLResponse)
async def verify_page(pages: PageSource = Depends(get_page_source)):
    """Render the code entry page."""
    return HTMLResponse(pages.render(VERIFY_PAGE))
