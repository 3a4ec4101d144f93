"""
Entry point for running the API with `python -m backend`.
"""
import os

import uvicorn

from backend.settings import get_settings

if __name__ == "__main__":
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8000")),
        reload=get_settings().is_development,
    )
