from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/registration", methods=["POST"], endpoint="registration")
    @api_view
    def registration():
        container.registration_service.submit(json_body())
        return jsonify({"success": True, "message": "Cadastro enviado! Entraremos em contato em breve."}), 201
