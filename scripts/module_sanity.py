#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path
import sys
from typing import List

from passforge.registry import MANIFEST_NAME, MODULES_PATH, load_manifest


def check_modules(modules_dir: Path = MODULES_PATH) -> List[str]:
    errors: List[str] = []
    mounts: dict[str, str] = {}

    for module_dir in sorted(modules_dir.iterdir()):
        manifest = module_dir / MANIFEST_NAME
        if not module_dir.is_dir() or not manifest.exists():
            continue
        data = load_manifest(manifest)
        if data is None:
            errors.append(f"{module_dir.name}: unreadable manifest")
            continue

        for key in ("title", "description", "category"):
            if not str(data.get(key) or "").strip():
                errors.append(f"{module_dir.name}: missing {key}")

        entrypoints = data.get("entrypoints") or {}
        api = entrypoints.get("api") if isinstance(entrypoints, dict) else None
        if data["public"]:
            if not api:
                errors.append(f"{module_dir.name}: missing entrypoints.api")
            elif ":" not in str(api):
                errors.append(f"{module_dir.name}: entrypoints.api must be module:app")

        mount = data["mount"]
        if mount == "/":
            errors.append(f"{module_dir.name}: mount '/' is reserved")
        elif mount in mounts:
            errors.append(f"{module_dir.name}: mount '{mount}' duplicates {mounts[mount]}")
        else:
            mounts[mount] = data["name"]

    return errors


def main() -> int:
    errors = check_modules()
    if errors:
        print("Module sanity check failed:\n")
        for issue in errors:
            print(f"- {issue}")
        return 1

    print("Module sanity check passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
