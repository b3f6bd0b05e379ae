from __future__ import annotations

from flask import Flask, request

from ..common.http import envelope, json_api
from ..container import Container
from ..core.enums import ReportPeriod


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @json_api
    def dashboard():
        board = container.dashboard_service.build()
        return envelope(board, board.notifications)

    @app.route("/api/reports", methods=["GET"], endpoint="reports")
    @json_api
    def reports():
        period = request.args.get("period") or ReportPeriod.WEEK.value
        report = container.report_service.build(period)
        return envelope(report, report.notifications)
