from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.web import current_user, decode_request, fail, json_errors, make_guards, ok, parse_date_arg
from ..container import Container
from .schemas import AttendanceSubmitIn


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.session)

    @app.route("/attendance/sheet", methods=["GET"], endpoint="attendance_sheet")
    @login_required
    @json_errors
    def attendance_sheet():
        user = current_user(container.session)
        class_id = request.args.get("classId") or (user.class_id if user.is_teacher else None)
        if not class_id:
            return fail("Please select a class", 400)

        sheet = container.attendance_service.marking_sheet(
            class_id=class_id,
            day=parse_date_arg(request.args.get("date"), now_local().date()),
            shift=request.args.get("shift"),
            part=request.args.get("part"),
        )
        return ok(
            {
                "class_id": sheet.class_id,
                "class_name": sheet.class_name,
                "date": sheet.day,
                "teacher": sheet.teacher,
                "students": sheet.rows,
                "has_existing": sheet.has_existing,
                "is_english": sheet.is_english,
                "present": sheet.present_count,
                "absent": sheet.absent_count,
            }
        )

    @app.route("/attendance/teacher", methods=["GET"], endpoint="attendance_teacher")
    @login_required
    @json_errors
    def attendance_teacher():
        teacher = container.teacher_service.teacher_of_class(request.args.get("classId", ""))
        return ok({"teacher": teacher})

    @app.route("/attendance", methods=["POST"], endpoint="submit_attendance")
    @login_required
    @json_errors
    def submit_attendance():
        body = decode_request(AttendanceSubmitIn, request.get_json(silent=True))
        submission = container.attendance_service.submit(
            user=current_user(container.session),
            class_id=body.class_id,
            teacher_id=body.teacher_id,
            day=parse_date_arg(body.date, now_local().date()),
            marks=body.marks or {},
            mark_all_status=body.mark_all,
            shift=body.shift,
            part=body.part,
        )
        return ok(
            {"present": submission.present_count, "absent": submission.absent_count},
            message="Attendance submitted successfully",
        )
