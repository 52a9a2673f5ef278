#!/usr/bin/env python3
"""
Entry point for the CHUK Music Theory MCP Server.

Runs the server over stdio (default) or HTTP. Project instruments are
read from ./instruments unless --instruments-dir points elsewhere.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

INSTRUMENTS_DIR_ENV = "CHUK_THEORY_INSTRUMENTS_DIR"


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Music Theory MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--instruments-dir",
        help="Directory of project instrument YAML files (default: ./instruments)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (includes voicing search details)",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.instruments_dir:
        os.environ[INSTRUMENTS_DIR_ENV] = args.instruments_dir

    # The server module builds its loader at import time
    from chuk_mcp_theory.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Music Theory MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Music Theory MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
