import argparse
import asyncio
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from alumni_admin.core.config import get_settings
from alumni_admin.resources import available_resources, resolve_resource
from gateway.client import ResourceClient
from gateway.service import export_resource


def _default_output(resource: str, fmt: str) -> Path:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return Path("exports") / f"{resource}-{stamp}.{fmt}"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export alumni platform records")
    parser.add_argument(
        "--resource",
        required=True,
        choices=available_resources(),
        help="Resource type to export",
    )
    parser.add_argument("--search", default="", help="Search term applied to the listing")
    parser.add_argument("--limit", type=int, default=None, help="Export up to N records")
    parser.add_argument("--page-size", type=int, default=None, help="Override pagination size")
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=("json", "csv"),
        default="json",
        help="Output file format",
    )
    parser.add_argument("--output", type=Path, default=None, help="Destination file")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    resource = resolve_resource(args.resource, settings)
    output = args.output or _default_output(resource.name, args.fmt)
    if args.limit is not None and args.limit <= 0:
        logger.warning("Ignoring non-positive limit: {}", args.limit)
        args.limit = None
    async with ResourceClient(settings=settings, page_size=args.page_size) as client:
        return await export_resource(
            client,
            resource,
            output,
            query=args.search,
            limit=args.limit,
            fmt=args.fmt,
        )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
