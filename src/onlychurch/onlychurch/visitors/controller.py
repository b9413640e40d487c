from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.web import api_view, csv_response, current_tenant, json_body, query_page, record_dict, tenant_required
from ..container import Container

EXPORT_FIELDS = ["name", "visit_date", "email", "phone", "whatsapp", "address", "source", "marital_status"]


def _visitor_json(visitor) -> dict:
    data = record_dict(visitor)
    data.pop("tenant_id", None)
    return data


def register(app: Flask, container: Container) -> None:
    service = container.visitor_service

    @app.route("/api/visitors", methods=["GET"], endpoint="list_visitors")
    @tenant_required
    @api_view
    def list_visitors():
        page = service.list_visitors(current_tenant(), search=request.args.get("search"), page=query_page())
        return jsonify({
            "success": True,
            "items": [_visitor_json(v) for v in page.items],
            "total": page.total,
            "page": page.page,
            "pages": page.pages,
        })

    @app.route("/api/visitors", methods=["POST"], endpoint="create_visitor")
    @tenant_required
    @api_view
    def create_visitor():
        visitor_id = service.register_visitor(current_tenant(), json_body())
        return jsonify({"success": True, "id": visitor_id, "message": "Visitante cadastrado com sucesso!"}), 201

    @app.route("/api/visitors/<visitor_id>", methods=["DELETE"], endpoint="delete_visitor")
    @tenant_required
    @api_view
    def delete_visitor(visitor_id: str):
        service.delete_visitor(current_tenant(), visitor_id)
        return jsonify({"success": True, "message": "Visitante excluído com sucesso!"})

    @app.route("/api/visitors/stats", methods=["GET"], endpoint="visitor_stats")
    @tenant_required
    @api_view
    def visitor_stats():
        return jsonify({"success": True, **service.visitor_stats(current_tenant()).as_dict()})

    @app.route("/api/visitors.csv", methods=["GET"], endpoint="visitors_csv")
    @tenant_required
    @api_view
    def visitors_csv():
        visitors = service.all_visitors(current_tenant(), search=request.args.get("search"))
        filename = f"visitantes_{date.today().strftime('%Y%m%d')}.csv"
        return csv_response((_visitor_json(v) for v in visitors), fieldnames=EXPORT_FIELDS, filename=filename)
