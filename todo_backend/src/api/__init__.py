"""
FastAPI Todo Backend package.

Exposes the FastAPI app instance for convenience imports
(``from src.api import app``).
"""

from .main import app  # noqa: F401
