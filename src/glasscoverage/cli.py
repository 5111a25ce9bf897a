from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from glasscoverage.config import load_config
from glasscoverage.coverage import CoverageChecker, CoverageResult
from glasscoverage.geo import coordinates_from_zip, distance_miles

console = Console()


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def _lookup(zip_code: str) -> None:
    coordinate = coordinates_from_zip(zip_code)
    if coordinate is None:
        console.print(f"[yellow]No coordinates for ZIP {zip_code}[/yellow]")
        return
    console.print(f"{zip_code}: lat={coordinate.lat:.2f} lng={coordinate.lng:.2f}")


def _distance(from_zip: str, to_zip: str) -> None:
    origin = coordinates_from_zip(from_zip)
    target = coordinates_from_zip(to_zip)
    if origin is None or target is None:
        missing = from_zip if origin is None else to_zip
        console.print(f"[yellow]No coordinates for ZIP {missing}[/yellow]")
        return
    console.print(f"{from_zip} -> {to_zip}: {distance_miles(origin, target):.1f} miles")


def _check(zip_code: str, config_path: str | None) -> CoverageResult:
    checker = CoverageChecker.from_config(load_config(config_path))
    result = checker.check_zip(zip_code)
    console.print(result.message)
    if result.matches:
        table = Table("Location", "State", "Miles", "Radius", "In range")
        for match in result.matches:
            table.add_row(
                match.location.name,
                match.location.state,
                f"{match.distance_miles:.1f}",
                f"{match.location.service_radius:.0f}",
                "yes" if match.in_range else "no",
            )
        console.print(table)
    return result


def main() -> None:
    parser = argparse.ArgumentParser(prog="glasscoverage")
    parser.add_argument("--verbose", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="approximate coordinates for a ZIP code")
    lookup.add_argument("zip_code")

    distance = sub.add_parser("distance", help="straight-line miles between two ZIP codes")
    distance.add_argument("from_zip")
    distance.add_argument("to_zip")

    check = sub.add_parser("check", help="is a ZIP code inside a service area")
    check.add_argument("zip_code")
    check.add_argument("--config", default=None)

    web = sub.add_parser("web")
    web.add_argument("--host", default="0.0.0.0")
    web.add_argument("--port", type=int, default=8000)

    args = parser.parse_args()
    configure_logging(args.verbose)

    if args.command == "web":
        import uvicorn

        uvicorn.run("glasscoverage.api:app", host=args.host, port=args.port, reload=False)
        return

    if args.command == "lookup":
        _lookup(args.zip_code)
        return

    if args.command == "distance":
        _distance(args.from_zip, args.to_zip)
        return

    if args.command == "check":
        _check(args.zip_code, args.config)
        return

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    main()
