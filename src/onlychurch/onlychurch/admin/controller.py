from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_view, current_tenant, tenant_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/stats", methods=["GET"], endpoint="admin_stats")
    @tenant_required
    @api_view
    def admin_stats():
        stats = container.admin_service.console_stats(current_tenant())
        return jsonify({"success": True, **stats.as_dict()})
