from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.geo_attendance.geo_attendance.common.datetime_utils import parse_iso_date
from src.geo_attendance.geo_attendance.container import build_container
from src.geo_attendance.geo_attendance.core.enums import AttendanceStatus, ReportFormat
from src.geo_attendance.geo_attendance.reports.model import DateRange, ReportFilters, ReportOptions


def main() -> None:
    parser = argparse.ArgumentParser(description="Export an attendance report from the configured records file.")
    parser.add_argument("start", help="YYYY-MM-DD")
    parser.add_argument("end", help="YYYY-MM-DD")
    parser.add_argument("--format", default="csv", choices=[f.value for f in ReportFormat])
    parser.add_argument("--include-location", action="store_true")
    parser.add_argument("--include-distance", action="store_true")
    parser.add_argument("--department")
    parser.add_argument("--status", choices=[s.value for s in AttendanceStatus])
    parser.add_argument("--employee-id")
    parser.add_argument("--records", help="JSON records file (overrides ATTENDANCE_RECORDS_PATH)")
    parser.add_argument("--out-dir", default=".")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings_module = importlib.import_module(get_settings_module())
    settings = {name: getattr(settings_module, name) for name in dir(settings_module) if name.isupper()}
    if args.records:
        settings["ATTENDANCE_RECORDS_PATH"] = args.records

    container = build_container(settings=settings)
    options = ReportOptions(
        date_range=DateRange(start=parse_iso_date(args.start), end=parse_iso_date(args.end)),
        format=ReportFormat.parse(args.format),
        include_location=args.include_location,
        include_distance=args.include_distance,
        filters=ReportFilters(
            department=args.department,
            status=AttendanceStatus.parse(args.status) if args.status else None,
            employee_id=args.employee_id,
        ),
    )

    artifact = container.report_service.export(options)
    out_path = Path(args.out_dir) / artifact.filename
    out_path.write_bytes(artifact.content)
    print(f"OK: wrote {out_path} ({artifact.media_type}, {len(artifact.content)} bytes)")


if __name__ == "__main__":
    main()
