from __future__ import annotations

import json
import logging
from datetime import datetime
from functools import wraps

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..auth.model import Identity
from ..common.http import ISODateJSONProvider
from ..container import Container
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    """Server-rendered dashboard under /ui.

    The issued token lives in the signed session cookie and every page
    re-verifies it. Role checks in the templates only hide buttons; the
    services behind each form enforce roles.
    """

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                identity = container.token_service.verify(session.get("token"))
            except AuthorizationError:
                session.clear()
                flash("Please log in to continue", "warning")
                return redirect(url_for("ui_login"))
            return view(identity, *args, **kwargs)

        return wrapper

    def _run(action, success: str, failure: str) -> None:
        try:
            action()
            flash(success, "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Dashboard action failed: %s", failure)
            flash(failure, "danger")

    @app.route("/ui/login", methods=["GET", "POST"], endpoint="ui_login")
    def ui_login():
        if request.method == "POST":
            try:
                result = container.auth_service.login(
                    request.form.get("email", ""),
                    request.form.get("password", ""),
                )
                session["token"] = result.token
                session["role"] = result.role.value
                session["email"] = result.email
                flash("Login successful!", "success")
                return redirect(url_for("ui_dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Login failed unexpectedly")
                flash("Login failed", "danger")

        return render_template("login.html")

    @app.route("/ui/logout", endpoint="ui_logout")
    def ui_logout():
        session.clear()
        flash("Logged out.", "info")
        return redirect(url_for("ui_login"))

    @app.route("/ui", endpoint="ui_dashboard")
    @login_required
    def ui_dashboard(current: Identity):
        students, stats, comments = [], None, []
        try:
            students = container.student_service.list_students()
        except Exception:
            logger.exception("Failed to fetch students")
            flash("Failed to fetch students", "danger")
        try:
            stats = container.attendance_service.stats()
        except Exception:
            logger.exception("Failed to fetch stats")
            flash("Failed to fetch stats", "danger")
        try:
            comments = container.comment_service.list_recent()
        except Exception:
            logger.exception("Failed to fetch comments")
            flash("Failed to fetch comments", "danger")

        editing = None
        edit_id = request.args.get("edit", type=int)
        if edit_id and current.role == Role.ADMIN:
            editing = next((s for s in students if s.id == edit_id), None)

        history, history_student_id = None, request.args.get("history", type=int)
        if history_student_id:
            try:
                history = container.attendance_service.history(history_student_id)
                if not history:
                    flash("No attendance records found", "info")
            except Exception:
                logger.exception("Failed to fetch attendance history")
                flash("Failed to fetch attendance", "danger")

        return render_template(
            "dashboard.html",
            current=current,
            is_admin=current.role == Role.ADMIN,
            students=students,
            stats=stats,
            comments=comments,
            editing=editing,
            history=history,
            history_student_id=history_student_id,
            statuses=[s.value for s in AttendanceStatus],
        )

    @app.route("/ui/students", methods=["POST"], endpoint="ui_save_student")
    @login_required
    def ui_save_student(current: Identity):
        data = {
            "name": request.form.get("name", ""),
            "email": request.form.get("email", ""),
            "enrollment_year": request.form.get("enrollment_year", ""),
        }
        editing_id = request.form.get("editing_id", type=int)
        if editing_id:
            _run(
                lambda: container.student_service.update_student(
                    current_role=current.role, student_id=editing_id, data=data
                ),
                "Student updated",
                "Operation failed",
            )
        else:
            _run(
                lambda: container.student_service.create_student(current_role=current.role, data=data),
                "Student added",
                "Operation failed",
            )
        return redirect(url_for("ui_dashboard"))

    @app.route("/ui/students/<int:student_id>/delete", methods=["POST"], endpoint="ui_delete_student")
    @login_required
    def ui_delete_student(current: Identity, student_id: int):
        _run(
            lambda: container.student_service.delete_student(current_role=current.role, student_id=student_id),
            "Student deleted",
            "Failed to delete student",
        )
        return redirect(url_for("ui_dashboard"))

    @app.route("/ui/attendance", methods=["POST"], endpoint="ui_mark_attendance")
    @login_required
    def ui_mark_attendance(current: Identity):
        status = request.form.get("status", "")
        _run(
            lambda: container.attendance_service.mark(student_id=request.form.get("student_id"), status=status),
            f"Marked {status}",
            "Failed to mark attendance",
        )
        return redirect(url_for("ui_dashboard"))

    @app.route("/ui/comments", methods=["POST"], endpoint="ui_post_comment")
    @login_required
    def ui_post_comment(current: Identity):
        data = {"title": request.form.get("title", ""), "body": request.form.get("body", "")}
        if not data["title"].strip() or not data["body"].strip():
            flash("Write title & body", "danger")
            return redirect(url_for("ui_dashboard"))

        _run(
            lambda: container.comment_service.post(current=current, data=data),
            "Note added",
            "Failed to add note",
        )
        return redirect(url_for("ui_dashboard"))

    @app.route("/ui/export", endpoint="ui_export")
    @login_required
    def ui_export(current: Identity):
        payload = {
            "students": container.student_service.list_students(),
            "stats": container.attendance_service.stats().to_dict(),
            "comments": container.comment_service.list_recent(),
        }
        body = json.dumps(payload, default=ISODateJSONProvider.default, indent=2, ensure_ascii=False)
        filename = f"university_tracker_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        return app.response_class(
            body,
            mimetype="application/json",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
