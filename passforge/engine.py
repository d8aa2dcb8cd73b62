from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from passforge.registry import MODULES_PATH, load_modules

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def public_modules(modules: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
    items = [
        {
            "name": meta["name"],
            "title": meta.get("title") or meta["name"],
            "description": meta.get("description") or "",
            "mount": meta["mount"],
        }
        for meta in modules.values()
        if meta.get("public", True)
    ]
    items.sort(key=lambda item: item["title"].lower())
    return items


def build_app(modules_path: Path = MODULES_PATH) -> FastAPI:
    app = FastAPI(title="Passforge")
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    modules = load_modules(modules_path)
    listing = public_modules(modules)

    @app.get("/", response_class=HTMLResponse)
    def hub_index(request: Request):
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "index.html",
            {"modules": listing, "base_path": base_path},
        )

    @app.get("/modules")
    def hub_modules() -> List[Dict[str, Any]]:
        return listing

    for meta in modules.values():
        api_entry = (meta.get("entrypoints") or {}).get("api")
        if not api_entry:
            continue
        try:
            subapp = import_attr(api_entry)
        except (ImportError, AttributeError, ValueError):
            logger.exception("Failed to load %s for module %s.", api_entry, meta["name"])
            continue
        app.mount(meta["mount"], subapp)

    return app
