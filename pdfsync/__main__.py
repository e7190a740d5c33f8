#!/usr/bin/env python3
"""
PDF Sync Service - точка входа.

    python -m pdfsync [PDF_DIR] [--host HOST] [--port PORT] [--log-level LEVEL]
"""
import argparse

import uvicorn

from pdfsync.logging_config import get_logger, setup_logging
from pdfsync.main import create_app
from pdfsync.settings import settings


def main():
    parser = argparse.ArgumentParser(description="Serve a watched PDF directory with live updates")
    parser.add_argument(
        "pdf_dir",
        nargs="?",
        default=None,
        help="Directory to watch (default: $PDF_DIR or %s)" % settings.PDF_DIR,
    )
    parser.add_argument("--host", default=settings.HOST, help="Bind host (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Bind port (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="DEBUG, INFO, WARNING, ERROR")
    args = parser.parse_args()

    setup_logging(args.log_level)
    logger = get_logger("pdfsync")

    app = create_app(watched_dir=args.pdf_dir)
    logger.info(f"PDF Viewer running at http://{args.host}:{args.port}/")

    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
