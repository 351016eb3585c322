from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.logger import get_logger
from ..container import Container
from ..core.exceptions import InvalidDateRange, StoreError

logger = get_logger("CalendarController")


def register(app: Flask, container: Container) -> None:
    def _selected_month() -> tuple[int | None, int | None]:
        return request.args.get("year", type=int), request.args.get("month", type=int)

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("calendar"))

    @app.route("/calendar", endpoint="calendar")
    def calendar():
        year, month = _selected_month()
        try:
            view = container.calendar_service.assemble(year, month)
        except InvalidDateRange as e:
            flash(str(e), "warning")
            return redirect(url_for("calendar"))
        except StoreError:
            logger.exception("Failed to load calendar")
            flash("Database error while loading the calendar", "danger")
            return render_template("calendar.html", view=None), 503

        return render_template("calendar.html", view=view)

    @app.route("/api/calendar", endpoint="api_calendar")
    def api_calendar():
        year, month = _selected_month()
        try:
            view = container.calendar_service.assemble(year, month)
        except InvalidDateRange as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except StoreError:
            logger.exception("Failed to load calendar")
            return jsonify({"success": False, "message": "Database error"}), 503

        return jsonify(view.to_dict()), 200
