from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

MODULES_PATH = Path(__file__).parent.parent / "modules"
MANIFEST_NAME = "module.yaml"


def _normalize_module(data: Dict[str, Any], *, path: Path | None = None) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or str(name).replace("_", "-")
    mount = data.get("mount") or f"/{slug}"
    if not mount.startswith("/"):
        mount = "/" + mount
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": str(name),
            "slug": slug,
            "mount": mount.rstrip("/") or "/",
            "public": bool(public),
        }
    )
    if path is not None:
        normalized["path"] = path
    return normalized


def load_manifest(manifest: Path) -> Dict[str, Any] | None:
    try:
        data = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError:
        logger.warning("Skipping %s: invalid YAML.", manifest)
        return None
    if not isinstance(data, dict):
        logger.warning("Skipping %s: manifest is not a mapping.", manifest)
        return None
    return _normalize_module(data, path=manifest.parent)


def load_modules(modules_path: Path = MODULES_PATH) -> Dict[str, Dict[str, Any]]:
    modules: Dict[str, Dict[str, Any]] = {}
    if not modules_path.exists():
        return modules

    for module_dir in sorted(modules_path.iterdir()):
        manifest = module_dir / MANIFEST_NAME
        if not module_dir.is_dir() or not manifest.exists():
            continue
        normalized = load_manifest(manifest)
        if normalized:
            modules[normalized["name"]] = normalized
    return modules
