"""
docs.py — OpenAPI document output.
The document is derived from the app's routes and pydantic schemas, so it cannot
drift from the code. Written at startup and on demand:

    python -m trackstar.docs [output-file]
"""

import json
import logging
import sys
from pathlib import Path

from fastapi import FastAPI

from trackstar.config import OPENAPI_OUTPUT_FILE, PUBLIC_HOST

logger = logging.getLogger(__name__)


def build_openapi(app: FastAPI) -> dict:
    schema = dict(app.openapi())
    schema["servers"] = [
        {"url": f"{scheme}://{PUBLIC_HOST}"} for scheme in ("http", "https")
    ]
    return schema


def write_openapi(app: FastAPI, output_file: str | Path = OPENAPI_OUTPUT_FILE) -> Path:
    path = Path(output_file)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(build_openapi(app), indent=2), encoding="utf-8")
    logger.info("OpenAPI document written to %s", path)
    return path


def main(argv: list[str] | None = None) -> int:
    from trackstar.main import create_app

    argv = sys.argv[1:] if argv is None else argv
    output = argv[0] if argv else OPENAPI_OUTPUT_FILE
    logging.basicConfig(level=logging.INFO)
    write_openapi(create_app(init_database=False, generate_docs=False), output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
