from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import requests

from ..common.validators import mask_phone, optional_email, optional_text, require_non_empty
from ..core.exceptions import RegistrationError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChurchRegistration:
    name: str
    phone: str
    email: str
    church: str
    pastor: str
    social_network: Optional[str] = None
    member_count: Optional[str] = None

    def payload(self) -> dict:
        """Field names the sign-up webhook expects."""
        return {
            "nome": self.name,
            "telefone": self.phone,
            "email": self.email,
            "igreja": self.church,
            "pastor": self.pastor,
            "redeSocial": self.social_network or "",
            "quantidadeMembros": self.member_count or "",
        }


def registration_from_form(form: Mapping) -> ChurchRegistration:
    name = require_non_empty(form.get("name"), "Nome")
    phone = mask_phone(form.get("phone"))
    if not phone:
        raise ValidationError("Telefone é obrigatório")
    email = optional_email(form.get("email"))
    if not email:
        raise ValidationError("Email é obrigatório")
    return ChurchRegistration(
        name=name,
        phone=phone,
        email=email,
        church=require_non_empty(form.get("church"), "Igreja"),
        pastor=require_non_empty(form.get("pastor"), "Pastor"),
        social_network=optional_text(form.get("social_network")),
        member_count=optional_text(str(form.get("member_count") or "")),
    )


class RegistrationService:
    """Forwards church sign-ups from the landing page to the onboarding webhook."""

    def __init__(self, webhook_url: Optional[str], *, timeout: float = 10, session: Optional[requests.Session] = None):
        self._webhook_url = webhook_url
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    def submit(self, form: Mapping) -> dict:
        registration = registration_from_form(form)
        if not self._webhook_url:
            logger.error("REGISTRATION_WEBHOOK_URL is not configured")
            raise RegistrationError("Cadastro indisponível no momento")

        try:
            response = self._session.post(self._webhook_url, json=registration.payload(), timeout=self._timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning("registration webhook failed for %s: %s", registration.email, e)
            raise RegistrationError("Falha ao enviar cadastro. Tente novamente mais tarde.") from e

        try:
            return response.json()
        except ValueError:
            return {}
