"""
Console front-end for the APOD Explorer gateways.
Start the API first (python -m app.main), then run:

    python scripts/run_gallery.py              # last 7 days
    python scripts/run_gallery.py --today      # today's image
    python scripts/run_gallery.py --explain 2026-10-18
"""

import argparse
import asyncio
import sys

from app.client import GalleryController, GalleryView, GatewayClient, render_text
from app.core.config import get_settings


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    gateway = GatewayClient(args.gateway_url or settings.gateway_url, api_prefix=settings.api_prefix)
    controller = GalleryController(gateway, notify=lambda message: print(f"🚨 {message}", file=sys.stderr))

    if args.today:
        await controller.load_today()
    else:
        await controller.load_recent()

    if args.explain:
        targets = [image for image in controller.images if image.date in args.explain]
        missing = set(args.explain) - {image.date for image in targets}
        for image_date in sorted(missing):
            print(f"⚠️  {image_date} is not in the loaded gallery", file=sys.stderr)
        # Different dates may be explained concurrently
        await asyncio.gather(*(controller.explain(image) for image in targets))

    print(render_text(GalleryView.from_controller(controller), full_descriptions=args.full))
    return 1 if controller.error else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Browse NASA's Astronomy Picture of the Day")
    parser.add_argument("--today", action="store_true", help="show only today's image")
    parser.add_argument("--explain", nargs="*", metavar="DATE", default=[], help="request AI explanations for these dates")
    parser.add_argument("--full", action="store_true", help="print full NASA descriptions")
    parser.add_argument("--gateway-url", help="override GATEWAY_URL")
    sys.exit(asyncio.run(run(parser.parse_args())))


if __name__ == "__main__":
    main()
