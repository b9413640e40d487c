from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_view, current_tenant, json_body, tenant_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.group_service

    @app.route("/api/groups", methods=["GET"], endpoint="list_groups")
    @tenant_required
    @api_view
    def list_groups():
        tenant_id = current_tenant()
        return jsonify({
            "success": True,
            "items": [v.as_dict() for v in service.list_groups(tenant_id)],
            "stats": service.group_stats(tenant_id),
        })

    @app.route("/api/groups", methods=["POST"], endpoint="create_group")
    @tenant_required
    @api_view
    def create_group():
        group_id = service.create_group(current_tenant(), json_body())
        return jsonify({"success": True, "id": group_id, "message": "Grupo criado com sucesso!"}), 201

    @app.route("/api/groups/<group_id>", methods=["DELETE"], endpoint="delete_group")
    @tenant_required
    @api_view
    def delete_group(group_id: str):
        service.delete_group(current_tenant(), group_id)
        return jsonify({"success": True, "message": "Grupo excluído com sucesso!"})

    @app.route("/api/groups/<group_id>/members", methods=["POST"], endpoint="add_group_member")
    @tenant_required
    @api_view
    def add_group_member(group_id: str):
        service.add_member(current_tenant(), group_id, json_body().get("member_id"))
        return jsonify({"success": True, "message": "Membro adicionado ao grupo!"}), 201

    @app.route("/api/groups/<group_id>/members/<member_id>", methods=["DELETE"], endpoint="remove_group_member")
    @tenant_required
    @api_view
    def remove_group_member(group_id: str, member_id: str):
        service.remove_member(current_tenant(), group_id, member_id)
        return jsonify({"success": True, "message": "Membro removido do grupo!"})
