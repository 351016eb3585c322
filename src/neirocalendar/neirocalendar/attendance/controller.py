from __future__ import annotations

from datetime import date

from flask import Flask, flash, redirect, request, url_for

from ..common.datetime_utils import parse_iso_date
from ..common.logger import get_logger
from ..container import Container
from ..core.exceptions import StoreError, ValidationError

logger = get_logger("AttendanceController")


def register(app: Flask, container: Container) -> None:
    def _back_to_calendar(day: date | None = None):
        if day is not None:
            return redirect(url_for("calendar", year=day.year, month=day.month))
        year = request.form.get("year", type=int)
        month = request.form.get("month", type=int)
        if year and month:
            return redirect(url_for("calendar", year=year, month=month))
        return redirect(url_for("calendar"))

    def _form_date() -> date:
        value = (request.form.get("date") or "").strip()
        try:
            return parse_iso_date(value)
        except ValueError as e:
            raise ValidationError(f"Invalid date: {value!r}") from e

    def _form_record_id() -> int:
        value = request.form.get("recordId", type=int)
        if value is None:
            raise ValidationError("Record id is required")
        return value

    @app.route("/calendar/add", methods=["POST"], endpoint="calendar_add")
    def calendar_add():
        try:
            visit_date = _form_date()
            container.attendance_service.create(request.form.get("personName", ""), visit_date)
            flash("Visit added", "success")
            return _back_to_calendar(visit_date)
        except ValidationError as e:
            flash(str(e), "warning")
        except StoreError:
            logger.exception("Failed to add visit")
            flash("Database error while adding the visit", "danger")
        return _back_to_calendar()

    @app.route("/calendar/add-recurring", methods=["POST"], endpoint="calendar_add_recurring")
    def calendar_add_recurring():
        try:
            start_date = _form_date()
            months = request.form.get("months", type=int)
            if months is None:
                raise ValidationError("Number of months is required")
            created = container.attendance_service.create_recurring(
                request.form.get("personName", ""), start_date, months
            )
            flash(f"{len(created)} visits added", "success")
            return _back_to_calendar(start_date)
        except ValidationError as e:
            flash(str(e), "warning")
        except StoreError:
            logger.exception("Failed to add recurring visits")
            flash("Database error while adding visits", "danger")
        return _back_to_calendar()

    def _set_attended(attended: bool):
        try:
            record_id = _form_record_id()
            if not container.attendance_service.mark_attended(record_id, attended):
                flash("Record not found", "warning")
        except ValidationError as e:
            flash(str(e), "warning")
        except StoreError:
            logger.exception("Failed to update attendance")
            flash("Database error while updating attendance", "danger")
        return _back_to_calendar()

    @app.route("/calendar/check", methods=["POST"], endpoint="calendar_check")
    def calendar_check():
        return _set_attended(True)

    @app.route("/calendar/uncheck", methods=["POST"], endpoint="calendar_uncheck")
    def calendar_uncheck():
        return _set_attended(False)

    @app.route("/calendar/delete", methods=["POST"], endpoint="calendar_delete")
    def calendar_delete():
        try:
            container.attendance_service.delete(_form_record_id())
        except ValidationError as e:
            flash(str(e), "warning")
        except StoreError:
            logger.exception("Failed to delete visit")
            flash("Database error while deleting the visit", "danger")
        return _back_to_calendar()
