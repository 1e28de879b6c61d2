from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    def _semester_arg() -> Optional[int]:
        value = (request.args.get("semester_id") or "").strip()
        if not value:
            return None
        if not value.isdecimal():
            raise ValidationError("Invalid semester_id")
        return int(value)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/semesters", endpoint="api_semesters")
    def api_semesters():
        return jsonify({"success": True, "semesters": container.report_service.list_semesters()})

    @app.route("/api/dashboard", endpoint="api_dashboard")
    def api_dashboard():
        return jsonify({"success": True, **container.report_service.dashboard(_semester_arg())})

    @app.route("/api/reports", endpoint="api_reports")
    def api_reports():
        return jsonify({"success": True, **container.report_service.reports(_semester_arg())})

    @app.route("/api/players/<int:player_id>/stats", endpoint="api_player_stats")
    def api_player_stats(player_id: int):
        return jsonify({"success": True, **container.report_service.player_profile(player_id, _semester_arg())})

    @app.route("/api/coaches/<int:coach_id>/stats", endpoint="api_coach_stats")
    def api_coach_stats(coach_id: int):
        return jsonify({"success": True, **container.report_service.coach_profile(coach_id, _semester_arg())})
