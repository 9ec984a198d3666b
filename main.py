"""
Organization Directory - Query Service Entry Point.

Headless ASGI application for uvicorn execution.

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000 --reload

Or run directly:
    python main.py
"""

import logging

import uvicorn

from core.app_context import ConfigLoader
from core.logging_config import setup_logging
from core.server import create_app


# -----------------------------------------------------------------------------
# Module-level Application Instance
# -----------------------------------------------------------------------------

_config = ConfigLoader()
_config.load()

# Setup logging first
setup_logging(getattr(logging, str(_config.get("app.log_level", "INFO")).upper(), logging.INFO))

# Export for uvicorn
app = create_app(_config)


# -----------------------------------------------------------------------------
# Direct Execution
# -----------------------------------------------------------------------------


def main() -> None:
    """Run the application directly with uvicorn."""
    host = _config.get("server.host", "127.0.0.1")
    port = _config.get("server.port", 8000)
    debug = _config.get("app.debug", False)

    uvicorn_config = {
        "host": host,
        "port": port,
        "reload": debug,
        "log_level": "warning",  # Suppress uvicorn info logs
        "access_log": False,
    }

    # If reload is enabled, exclude logs and cache directories
    if debug:
        uvicorn_config["reload_excludes"] = [
            "logs/*",
            "**/__pycache__/*",
            "**/*.pyc",
            ".venv/*",
            "*.log",
            "*.sqlite*",
        ]

    uvicorn.run("main:app", **uvicorn_config)


if __name__ == "__main__":
    main()
