from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from modules.gcd.core.compute import compute_gcd
from modules.gcd.core.errors import MissingFieldError
from modules.gcd.core.form import parse_form
from universe.errors import register_error_handlers

TITLE = "GCD Calculator"
FIELD = "n"

app = FastAPI(title=TITLE, docs_url=None, redoc_url=None, openapi_url=None)
register_error_handlers(app)

BASE_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"title": TITLE})


@app.post("/gcd", response_class=HTMLResponse)
async def post_gcd(request: Request):
    form = parse_form(
        await request.body(), content_type=request.headers.get("content-type")
    )
    tokens = form.get(FIELD)
    if tokens is None:
        raise MissingFieldError(FIELD)
    return HTMLResponse(f"GCD is {compute_gcd(tokens)}")
