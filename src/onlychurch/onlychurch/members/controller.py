from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.web import api_view, csv_response, current_tenant, json_body, query_page, record_dict, tenant_required
from ..container import Container

EXPORT_FIELDS = [
    "full_name",
    "email",
    "phone",
    "mobile",
    "birth_date",
    "marital_status",
    "department",
    "ministry_role",
    "baptism_date",
    "member_since",
]


def _member_json(member) -> dict:
    data = record_dict(member)
    data.pop("tenant_id", None)
    return data


def register(app: Flask, container: Container) -> None:
    service = container.member_service

    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    @tenant_required
    @api_view
    def list_members():
        page = service.list_members(current_tenant(), search=request.args.get("search"), page=query_page())
        return jsonify({
            "success": True,
            "items": [_member_json(m) for m in page.items],
            "total": page.total,
            "page": page.page,
            "pages": page.pages,
        })

    @app.route("/api/members", methods=["POST"], endpoint="create_member")
    @tenant_required
    @api_view
    def create_member():
        member_id = service.register_member(current_tenant(), json_body())
        return jsonify({"success": True, "id": member_id, "message": "Membro cadastrado com sucesso!"}), 201

    @app.route("/api/members/<member_id>", methods=["GET"], endpoint="get_member")
    @tenant_required
    @api_view
    def get_member(member_id: str):
        return jsonify({"success": True, "member": _member_json(service.get_member(current_tenant(), member_id))})

    @app.route("/api/members/<member_id>", methods=["PUT"], endpoint="update_member")
    @tenant_required
    @api_view
    def update_member(member_id: str):
        service.update_member(current_tenant(), member_id, json_body())
        return jsonify({"success": True, "message": "Membro atualizado com sucesso!"})

    @app.route("/api/members/<member_id>", methods=["DELETE"], endpoint="delete_member")
    @tenant_required
    @api_view
    def delete_member(member_id: str):
        service.delete_member(current_tenant(), member_id)
        return jsonify({"success": True, "message": "Membro excluído com sucesso!"})

    @app.route("/api/members/analytics", methods=["GET"], endpoint="member_analytics")
    @tenant_required
    @api_view
    def member_analytics():
        return jsonify({"success": True, **service.member_analytics(current_tenant()).as_dict()})

    @app.route("/api/members/birthdays", methods=["GET"], endpoint="member_birthdays")
    @tenant_required
    @api_view
    def member_birthdays():
        entries = service.birthdays_this_month(current_tenant(), search=request.args.get("search"))
        return jsonify({
            "success": True,
            "items": [{**_member_json(e.record), "age": e.age, "day": e.day} for e in entries],
        })

    @app.route("/api/members/current-month", methods=["GET"], endpoint="members_current_month")
    @tenant_required
    @api_view
    def members_current_month():
        members = service.joined_this_month(current_tenant(), search=request.args.get("search"))
        return jsonify({"success": True, "items": [_member_json(m) for m in members]})

    @app.route("/api/members.csv", methods=["GET"], endpoint="members_csv")
    @tenant_required
    @api_view
    def members_csv():
        members = service.all_members(current_tenant(), search=request.args.get("search"))
        filename = f"membros_{date.today().strftime('%Y%m%d')}.csv"
        return csv_response((_member_json(m) for m in members), fieldnames=EXPORT_FIELDS, filename=filename)
