#!/usr/bin/env python3
"""
Main entry point for the Nearby Places Ranking Service.
"""

import argparse
import asyncio
import json

from src.logging_config import configure_logging


def run_api():
    """Start the FastAPI server."""
    import uvicorn
    from src.config import settings

    uvicorn.run(
        "src.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


def run_search(args: argparse.Namespace):
    """Run one nearby search against the configured provider and print it."""
    from src.modules.nearby_ranking import NearbySearchRequestSchema, Orchestrator

    request = NearbySearchRequestSchema(
        lat=args.lat,
        lng=args.lng,
        radius=args.radius,
        type=args.type,
        keyword=args.keyword,
    )
    response = asyncio.run(Orchestrator().search_nearby(request))
    print(json.dumps(response.model_dump(mode="json"), indent=2, ensure_ascii=False))


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Nearby Places Ranking Service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  api       Start the FastAPI server
  search    Run one ranked nearby search and print the JSON response

Examples:
  python main.py api
  python main.py search --lat 40.73 --lng -73.99 --radius 5000 --keyword pizza
        """,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("api", help="Start the FastAPI server")

    search_parser = subparsers.add_parser("search", help="Run one ranked nearby search")
    search_parser.add_argument("--lat", type=float, required=True)
    search_parser.add_argument("--lng", type=float, required=True)
    search_parser.add_argument("--radius", type=float, default=None)
    search_parser.add_argument("--type", default=None)
    search_parser.add_argument("--keyword", default=None)

    args = parser.parse_args()

    # Configure logging
    configure_logging()

    # Run command
    if args.command == "api":
        run_api()
    elif args.command == "search":
        run_search(args)


if __name__ == "__main__":
    main()
