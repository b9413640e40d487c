from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import api_view, current_tenant, json_body, tenant_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @tenant_required
    @api_view
    def list_departments():
        tenant_id = current_tenant()
        views = service.list_departments(tenant_id, search=request.args.get("search"))
        return jsonify({
            "success": True,
            "items": [v.as_dict() for v in views],
            "stats": service.department_stats(tenant_id),
        })

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    @tenant_required
    @api_view
    def create_department():
        dept_id = service.create_department(current_tenant(), json_body())
        return jsonify({"success": True, "id": dept_id, "message": "Departamento criado com sucesso!"}), 201

    @app.route("/api/departments/<dept_id>", methods=["PUT"], endpoint="update_department")
    @tenant_required
    @api_view
    def update_department(dept_id: str):
        service.update_department(current_tenant(), dept_id, json_body())
        return jsonify({"success": True, "message": "Departamento atualizado com sucesso!"})

    @app.route("/api/departments/<dept_id>", methods=["DELETE"], endpoint="delete_department")
    @tenant_required
    @api_view
    def delete_department(dept_id: str):
        service.delete_department(current_tenant(), dept_id)
        return jsonify({"success": True, "message": "Departamento excluído com sucesso!"})
