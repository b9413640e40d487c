from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import api_view, current_tenant, json_body, record_dict, tenant_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.event_service

    @app.route("/api/events", methods=["GET"], endpoint="list_events")
    @tenant_required
    @api_view
    def list_events():
        events = service.list_events(
            current_tenant(),
            search=request.args.get("search"),
            month=request.args.get("month"),
            category=request.args.get("category"),
        )
        return jsonify({"success": True, "items": [record_dict(e) for e in events]})

    @app.route("/api/events", methods=["POST"], endpoint="create_event")
    @tenant_required
    @api_view
    def create_event():
        tenant_id = current_tenant()
        event_id = service.create_event(tenant_id, json_body(), created_by=tenant_id)
        return jsonify({"success": True, "id": event_id, "message": "Evento criado com sucesso!"}), 201

    @app.route("/api/events/<event_id>", methods=["DELETE"], endpoint="delete_event")
    @tenant_required
    @api_view
    def delete_event(event_id: str):
        service.delete_event(current_tenant(), event_id)
        return jsonify({"success": True, "message": "Evento excluído com sucesso!"})

    @app.route("/api/events/import", methods=["POST"], endpoint="import_events")
    @tenant_required
    @api_view
    def import_events():
        tenant_id = current_tenant()
        items = json_body().get("events")
        if not isinstance(items, list):
            raise ValidationError("Envie a lista de eventos em 'events'")
        count = service.import_events(tenant_id, items, created_by=tenant_id)
        return jsonify({"success": True, "imported": count, "message": f"{count} eventos importados!"})
