"""Serverless entrypoint exposing the FastAPI application."""

from __future__ import annotations

import sys
from pathlib import Path

# Make the package importable when the platform runs this file directly.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from lexdrill.main import app as fastapi_app  # noqa: E402

# Serverless runtimes look for a module-level ``app`` variable.
app = fastapi_app
