"""CLI entry point: ``python -m chipload SpeedNFeeds.txt -o MyTools.txt``"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config.defaults import REQUEST_FILE_NAME
from .config.machine_profiles import MachineModel, get_profile
from .config.settings import AppSettings
from .core.calculator import calculate
from .core.catalog import MaterialCatalog
from .core.errors import ChiploadError, IssueLog
from .core.request import JobRequest, read_request
from .report import ReportWriter


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="chipload",
        description="Recommend spindle speed and feed rate for a CNC milling job.",
    )
    p.add_argument("input", type=Path, nargs="?", default=None,
                   help=f"Request form (default: ./{REQUEST_FILE_NAME} if present)")
    p.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Report file to append to (default: from settings, MyTools.txt)",
    )
    p.add_argument("--table", type=Path, default=None,
                   help="Chipload table CSV (default: from settings or bundled)")
    p.add_argument(
        "--machine", choices=[m.value for m in MachineModel], default=None,
        help="Machine envelope (default: from settings, router)",
    )

    # Request fields, overriding the form
    p.add_argument("--material", default=None, help="Material to cut")
    p.add_argument("--diameter", default=None,
                   help="Tool diameter with unit, e.g. 6mm or '1/4 inch'")
    p.add_argument("--teeth", default=None, help="Number of flutes")
    p.add_argument("--quality", default=None,
                   help="Job quality 1 (finish) .. 5 (material removal)")
    p.add_argument("--unit", default=None, help="Feed rate output unit")

    p.add_argument("--beginner", action="store_true", default=None,
                   help="Conservative speeds and feeds")
    p.add_argument("--checklist", action="store_true", default=None,
                   help="Append a generic CNC checklist to the report")
    p.add_argument("--list-materials", action="store_true", default=None,
                   help="Append the supported materials to the report")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Print the loaded table and matching details")
    return p


def _load_request(args: argparse.Namespace) -> JobRequest:
    path = args.input
    if path is None and Path(REQUEST_FILE_NAME).exists():
        path = Path(REQUEST_FILE_NAME)

    request = JobRequest()
    if path is not None:
        print(f"Reading {path} ...")
        request = read_request(path)

    return request.with_overrides(
        material=args.material,
        tool_diameter=args.diameter,
        tooth_count=args.teeth,
        job_quality=args.quality,
        out_unit=args.unit,
        beginner=args.beginner,
        checklist=args.checklist,
        list_materials=args.list_materials,
    )


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = AppSettings.load()

    output: Path = args.output or Path(settings.report_path)
    table: Path = args.table or settings.table
    machine = get_profile(args.machine) if args.machine else settings.machine
    report = ReportWriter(output)
    issues = IssueLog()

    try:
        print(f"Loading {table} ...")
        catalog = MaterialCatalog.load(table)
        names = catalog.distinct_material_names()
        print(f"  {len(catalog)} entries, {len(names)} materials")
        if args.verbose:
            for entry in catalog:
                print(f"  {entry.material}: {entry.diameter:g} mm"
                      f"  chipload {entry.chipload}  factor {entry.rpm_factor}")
            print(f"  Materials: {', '.join(names)}")

        request = _load_request(args)
        print(f"Machine: {machine}")
        calc = calculate(request, catalog, machine, issues,
                         default_out_unit=settings.default_out_unit)
    except ChiploadError as exc:
        for issue in issues.warnings:
            print(f"  {issue}")
        report.write_error(exc.issue, issues.warnings)
        print(f"ERROR: {exc}", file=sys.stderr)
        return exc.exit_code

    for issue in calc.issues.warnings:
        print(f"  {issue}")
    if args.verbose:
        for line in calc.summary:
            print(f"  {line}")

    print(f"RPM: {calc.point.rpm}  Feed: {calc.feed_rate:.1f} {calc.out_unit}")
    report.write(calc)
    print(f"Wrote {output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
