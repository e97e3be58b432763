"""
Main entry point for gremlin-script.

Creates the FastAPI application instance for uvicorn.
"""

from gremlin_script.api.app import create_app
from gremlin_script.api.dependencies import ServiceConfig
from gremlin_script.core.config import get_settings
from gremlin_script.core.logging import setup_structured_logging

settings = get_settings()
setup_structured_logging(log_file_path=settings.log_file_path)

# Create application instance
app = create_app(config=ServiceConfig.from_settings(settings))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.gremlin_script_port)  # noqa: S104
