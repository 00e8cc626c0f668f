#!/usr/bin/env python3
"""
Entry point for running the Billing Ledger server.

Usage:
    python run.py [--port PORT] [--host HOST] [--reload]
"""

import argparse
import logging
import uvicorn

from billing.config import DATABASE_URL, LOG_LEVEL


def main():
    parser = argparse.ArgumentParser(description="Billing Ledger")
    parser.add_argument("--port", type=int, default=8000, help="Port to run on")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    url = f"http://{args.host}:{args.port}"

    print("\n" + "=" * 50)
    print("  Billing Ledger")
    print("=" * 50)
    print(f"\n  URL: {url}/api/v1")
    print(f"  Database: {DATABASE_URL}\n")
    print("  Press Ctrl+C to stop the server\n")
    print("=" * 50 + "\n")

    uvicorn.run(
        "billing.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
