"""Server-rendered admin pages."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette import status

from content_hub.core.config import settings

_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))
templates.env.globals["settings"] = settings

# (label, path) pairs rendered in the sidebar, in display order
SIDEBAR_LINKS: list[tuple[str, str]] = [
    ("Dashboard", "/admin/dashboard"),
    ("Chat", "/admin/chat"),
    ("Users", "/admin/users"),
    ("Collections", "/admin/collections"),
    ("Settings", "/admin/settings"),
]

router = APIRouter(prefix="/admin", include_in_schema=False)


def render(request: Request, template: str, title: str) -> HTMLResponse:
    context = {
        "title": title,
        "sidebar_links": SIDEBAR_LINKS,
        "active_path": request.url.path,
    }
    return templates.TemplateResponse(request, template, context)


@router.get("")
async def admin_root() -> RedirectResponse:
    return RedirectResponse(
        url="/admin/dashboard", status_code=status.HTTP_307_TEMPORARY_REDIRECT
    )


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(request: Request) -> HTMLResponse:
    return render(request, "dashboard.html", "Dashboard")


@router.get("/collections", response_class=HTMLResponse)
async def collections(request: Request) -> HTMLResponse:
    return render(request, "collections.html", "Collections")


@router.get("/users", response_class=HTMLResponse)
async def users(request: Request) -> HTMLResponse:
    return render(request, "users.html", "Users")


@router.get("/chat", response_class=HTMLResponse)
async def chat(request: Request) -> HTMLResponse:
    return render(request, "chat.html", "Chat Management")
