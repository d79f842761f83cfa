import argparse
import asyncio
import sys

import httpx

from .base import DEFAULT_CENTER, Place
from .session import AnalysisSession
from ..core.config import settings
from ..core.logging import configure_logging

def _alert(message: str) -> None:
    print(message, file=sys.stderr)

async def run(args: argparse.Namespace, transport: httpx.AsyncBaseTransport | None = None) -> int:
    session = AnalysisSession(args.backend_url, timeout=args.timeout, alert=_alert, transport=transport)
    session.select_place(Place(formatted_address=args.address, lat=args.lat, lng=args.lng))

    if args.mode == "listings":
        result = await session.find_listings()
    else:
        result = await session.analyze()

    if result is None:
        if session.error:
            print(session.error, file=sys.stderr)
        return 1
    print(result.model_dump_json(indent=2))
    return 0

def main(argv: list[str] | None = None, transport: httpx.AsyncBaseTransport | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ask the GeoValuate backend about an address")
    parser.add_argument("address", help="Formatted address, e.g. 'Erode, Tamil Nadu'")
    parser.add_argument("--lat", type=float, default=DEFAULT_CENTER.lat)
    parser.add_argument("--lng", type=float, default=DEFAULT_CENTER.lng)
    parser.add_argument("--mode", choices=["listings", "valuation"], default="listings")
    parser.add_argument("--backend-url", default=settings.BACKEND_URL)
    parser.add_argument("--timeout", type=float, default=settings.CLIENT_TIMEOUT_SECONDS)
    args = parser.parse_args(argv)

    configure_logging("WARNING")
    return asyncio.run(run(args, transport))

if __name__ == "__main__":
    raise SystemExit(main())
