from __future__ import annotations

import csv
import io
from datetime import timedelta

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.web import current_user, json_errors, make_guards, ok, parse_date_arg, parse_int_arg
from ..container import Container
from ..core.constants import DEFAULT_REPORT_DAYS
from .model import AttendanceReport
from .service import AttendanceReportQuery, FinanceReportQuery

STUDENT_CSV_FIELDS = ["student_id", "name", "class_name", "shift", "part", "present", "absent", "percentage"]


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container.session)

    def _attendance_report() -> AttendanceReport:
        today = now_local().date()
        end = parse_date_arg(request.args.get("endDate"), today)
        start = parse_date_arg(request.args.get("startDate"), end - timedelta(days=DEFAULT_REPORT_DAYS - 1))
        return container.attendance_report_service.build_report(
            user=current_user(container.session),
            query=AttendanceReportQuery(start=start, end=end, class_id=request.args.get("classId") or None),
            shift=request.args.get("shift"),
            part=request.args.get("part"),
            status=request.args.get("status"),
        )

    def _write_report_csv(*, report: AttendanceReport, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=STUDENT_CSV_FIELDS)
        writer.writeheader()
        for s in report.student_attendance:
            writer.writerow({f: getattr(s, f) for f in STUDENT_CSV_FIELDS})

        # BOM so spreadsheet tools pick up UTF-8 names
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/reports/attendance", methods=["GET"], endpoint="attendance_report")
    @login_required
    @json_errors
    def attendance_report():
        return ok(_attendance_report().to_dict())

    @app.route("/reports/attendance/export", methods=["GET"], endpoint="attendance_report_export")
    @login_required
    @json_errors
    def attendance_report_export():
        report = _attendance_report()
        stamp = now_local().strftime("%Y%m%d")
        return _write_report_csv(report=report, filename=f"attendance_report_{stamp}.csv")

    @app.route("/reports/finance", methods=["GET"], endpoint="finance_report")
    @admin_required
    @json_errors
    def finance_report():
        query = FinanceReportQuery(
            year=parse_int_arg(request.args.get("year"), "Year", now_local().year),
            month=request.args.get("month") or None,
        )
        report = container.finance_report_service.build_report(user=current_user(container.session), query=query)
        return ok(report.to_dict())

    @app.route("/reports/finance/payment-status", methods=["GET"], endpoint="payment_status")
    @admin_required
    @json_errors
    def payment_status():
        query = FinanceReportQuery(
            year=parse_int_arg(request.args.get("year"), "Year", now_local().year),
            month=request.args.get("month") or None,
        )
        status = container.finance_report_service.payment_status(user=current_user(container.session), query=query)
        return ok(status)
