#!/usr/bin/env python
"""
Run the SportFwd API server.

Usage:
    uv run python run_api.py
    uv run python run_api.py --reload  # Development mode
"""

import argparse
import logging
import uvicorn

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run SportFwd API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument("--log-level", type=str, help="Log level (debug, info, warning)")
    args = parser.parse_args()

    settings = get_settings()
    log_level = (args.log_level or settings.log_level).lower()

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
