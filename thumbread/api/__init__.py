"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from thumbread.api import app

    uvicorn thumbread.api:app --reload
"""

from thumbread.api.app import app

__all__ = ["app"]
