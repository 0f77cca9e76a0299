import argparse
import asyncio
import os
import sys

import httpx

# Add project root to path to allow imports from 'portfolio'
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from portfolio.core.config import settings
from portfolio.core.errors import LoadError
from portfolio.core.logging import configure_logging
from portfolio.domain.catalog import load_catalog
from portfolio.domain.filters import ALL
from portfolio.domain.models import VideoProject
from portfolio.domain.video_urls import embed_url, resolve_video_id, thumbnail_url


# --- Server ---
def run_server(args):
    from portfolio.main import run

    run(host=args.host, port=args.port, reload=args.reload)
    return 0


# --- Catalog browsing ---
async def run_projects(args, client: httpx.AsyncClient | None = None):
    url = args.url or settings.CATALOG_URL
    try:
        catalog = await load_catalog(url, client=client, timeout=args.timeout)
    except LoadError as e:
        print(f"\n--- ERROR: {e.message} ---")
        if e.__cause__ is not None:
            print(str(e.__cause__))
        return 1

    subs = catalog.subcategories(args.category)
    if subs:
        print(f"Subcategories for {args.category}: {', '.join(subs)}")

    matches = catalog.filter(args.category, args.subcategory)
    if not matches:
        print("No projects match")
        return 0

    for p in matches:
        kind = "video" if isinstance(p, VideoProject) else "design"
        print(f"[{p.id}] {p.title} ({p.category} / {p.subcategory}, {kind})")
    print(f"\n{len(matches)} of {len(catalog)} projects")
    return 0


# --- Video URL resolution ---
def run_resolve(args):
    video_id = resolve_video_id(args.url)
    if not video_id:
        print("Not a recognized YouTube URL")
        return 1
    print(f"id:        {video_id}")
    print(f"embed:     {embed_url(args.url)}")
    print(f"thumbnail: {thumbnail_url(args.url)}")
    return 0


# --- Main CLI ---
def build_parser():
    parser = argparse.ArgumentParser(description="Manage the portfolio catalog and admin server.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Subcommand: serve
    parser_serve = subparsers.add_parser("serve", help="Run the admin API server.")
    parser_serve.add_argument("--host", default=None, help="Bind address.")
    parser_serve.add_argument("--port", type=int, default=None, help="Port to listen on.")
    parser_serve.add_argument("--reload", action="store_true", help="Reload on code changes.")
    parser_serve.set_defaults(func=run_server)

    # Subcommand: projects
    parser_projects = subparsers.add_parser("projects", help="List published projects, optionally filtered.")
    parser_projects.add_argument("--url", default=None, help="Catalog URL (defaults to PORTFOLIO_CATALOG_URL).")
    parser_projects.add_argument("--category", default=ALL, help="Design, Video or All.")
    parser_projects.add_argument("--subcategory", default=ALL, help="Subcategory or All.")
    parser_projects.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds.")
    parser_projects.set_defaults(func=lambda args: asyncio.run(run_projects(args)))

    # Subcommand: resolve
    parser_resolve = subparsers.add_parser("resolve", help="Resolve a YouTube URL to id, embed and thumbnail.")
    parser_resolve.add_argument("url", help="Video URL.")
    parser_resolve.set_defaults(func=run_resolve)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(settings.LOG_LEVEL)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
