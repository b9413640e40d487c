from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_view, current_tenant, tenant_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @tenant_required
    @api_view
    def dashboard():
        return jsonify({"success": True, **container.dashboard_service.summary(current_tenant()).as_dict()})
