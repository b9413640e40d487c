from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import api_view, current_tenant, json_body, record_dict, tenant_required
from ..container import Container


def _child_json(child) -> dict:
    data = record_dict(child)
    data.pop("tenant_id", None)
    return data


def register(app: Flask, container: Container) -> None:
    service = container.children_service

    @app.route("/api/children", methods=["GET"], endpoint="list_children")
    @tenant_required
    @api_view
    def list_children():
        tenant_id = current_tenant()
        children = service.list_children(tenant_id, search=request.args.get("search"))
        return jsonify({
            "success": True,
            "items": [_child_json(c) for c in children],
            "stats": service.children_stats(tenant_id),
        })

    @app.route("/api/children", methods=["POST"], endpoint="create_child")
    @tenant_required
    @api_view
    def create_child():
        child_id = service.register_child(current_tenant(), json_body())
        return jsonify({"success": True, "id": child_id, "message": "Criança cadastrada com sucesso!"}), 201

    @app.route("/api/children/classes", methods=["GET"], endpoint="list_classes")
    @tenant_required
    @api_view
    def list_classes():
        return jsonify({"success": True, "items": [record_dict(c) for c in service.list_classes(current_tenant())]})

    @app.route("/api/children/classes", methods=["POST"], endpoint="create_class")
    @tenant_required
    @api_view
    def create_class():
        class_id = service.register_class(current_tenant(), json_body())
        return jsonify({"success": True, "id": class_id, "message": "Turma cadastrada com sucesso!"}), 201

    @app.route("/api/children/attendance", methods=["POST"], endpoint="record_attendance")
    @tenant_required
    @api_view
    def record_attendance():
        body = json_body()
        saved = service.record_attendance(
            current_tenant(),
            class_date=body.get("class_date"),
            entries=body.get("entries") or [],
        )
        return jsonify({"success": True, "saved": saved, "message": "Presença registrada com sucesso!"})
