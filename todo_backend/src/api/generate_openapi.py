"""
Write the OpenAPI schema of the todo backend to a JSON file.

API clients and documentation tools can consume the file without running the
server (or a database).

Usage:
    python -m src.api.generate_openapi [output_path]

The default output is <container_root>/interfaces/openapi.json.
"""
from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List, Optional

from loguru import logger

from .main import app, openapi_tags


def _default_output_path() -> str:
    script_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))  # .../src
    container_root = os.path.dirname(script_dir)
    return os.path.join(container_root, "interfaces", "openapi.json")


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Add any tag from openapi_tags that the generated schema lacks. Existing
    tag definitions are left alone.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def generate_openapi(output_path: Optional[str] = None) -> str:
    """Generate the OpenAPI schema file and return the written file path."""
    out_path = output_path or _default_output_path()
    schema = app.openapi()
    _ensure_tags(schema)

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    logger.info("Wrote OpenAPI schema to: {}", out_path)
    return out_path


def main() -> None:
    generate_openapi(sys.argv[1] if len(sys.argv) > 1 else None)


if __name__ == "__main__":
    main()
