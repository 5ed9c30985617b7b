"""
Entry point for running the API as a module.
"""

from .presentation.api.config import get_settings
from .presentation.api.main import app
from .infrastructure.logging import setup_logging_from_settings

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    setup_logging_from_settings(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
