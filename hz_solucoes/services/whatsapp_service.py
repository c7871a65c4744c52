"""
WhatsApp Service - Evolution API com fallback para WhatsApp Cloud API (Meta)
"""
import re
import logging
from typing import Any, Optional

import requests

from hz_solucoes.core import config
from hz_solucoes.core.exceptions import MessageDeliveryError
from hz_solucoes.core.utils import ensure_string_id

logger = logging.getLogger(__name__)


class WhatsAppService:
    """Serviço de envio de mensagens pelo WhatsApp"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        instance_name: Optional[str] = None,
        api_key: Optional[str] = None,
        phone_id: Optional[str] = None,
        access_token: Optional[str] = None,
        api_version: Optional[str] = None,
    ):
        self.base_url = (base_url or config.EVOLUTION_API_URL or "").rstrip("/")
        self.instance_name = instance_name or config.EVOLUTION_INSTANCE_NAME
        self.api_key = api_key if api_key is not None else config.EVOLUTION_API_KEY
        self.phone_id = phone_id or config.WHATSAPP_PHONE_ID
        self.access_token = access_token or config.WHATSAPP_ACCESS_TOKEN
        self.api_version = api_version or config.WHATSAPP_API_VERSION

    def is_configured(self) -> bool:
        """Verifica se a Evolution API está configurada"""
        return bool(self.base_url and self.instance_name and self.api_key)

    def is_meta_configured(self) -> bool:
        return bool(self.phone_id and self.access_token)

    @staticmethod
    def format_number(to: Any) -> str:
        """5511999999999@s.whatsapp.net / +55 11 99999-9999 -> 5511999999999@s.whatsapp.net"""
        digits = re.sub(r"\D", "", ensure_string_id(to).split("@")[0])
        return f"{digits}@s.whatsapp.net"

    def _send_evolution(self, to: Any, text: str) -> None:
        response = requests.post(
            f"{self.base_url}/message/sendText/{self.instance_name}",
            json={"number": self.format_number(to), "text": text},
            headers={"apikey": self.api_key},
            timeout=10
        )
        if response.status_code >= 400:
            raise MessageDeliveryError(f"Evolution API respondeu {response.status_code}: {response.text}")

    def _send_meta(self, to: Any, text: str) -> None:
        response = requests.post(
            f"https://graph.facebook.com/{self.api_version}/{self.phone_id}/messages",
            json={
                "messaging_product": "whatsapp",
                "to": ensure_string_id(to).split("@")[0],
                "type": "text",
                "text": {"body": text},
            },
            headers={"Authorization": f"Bearer {self.access_token}"},
            timeout=10
        )
        if response.status_code >= 400:
            raise MessageDeliveryError(f"Meta API respondeu {response.status_code}: {response.text}")

    def send_message(self, to: Any, text: str) -> bool:
        """Envia mensagem de texto. Nunca lança exceção: retorna False se falhar."""
        if self.is_configured():
            try:
                self._send_evolution(to, text)
                logger.info(f"Mensagem enviada via Evolution API para {to}")
                return True
            except (requests.RequestException, MessageDeliveryError) as e:
                logger.warning(f"Erro ao enviar via Evolution API: {e}")

        if self.is_meta_configured():
            try:
                self._send_meta(to, text)
                logger.info(f"Mensagem enviada via Meta API para {to}")
                return True
            except (requests.RequestException, MessageDeliveryError) as e:
                logger.error(f"Erro ao enviar via Meta API: {e}")
                return False

        if not self.is_configured():
            logger.warning("Nenhum gateway de WhatsApp configurado")
        return False

    def test_connection(self) -> bool:
        """Testa a conexão com a Evolution API"""
        if not self.is_configured():
            return False

        try:
            response = requests.get(
                f"{self.base_url}/instance/connectionState/{self.instance_name}",
                headers={"apikey": self.api_key},
                timeout=5
            )
            data = response.json()
            logger.info(f"Status da conexão: {data}")
            state = data.get("state") or (data.get("instance") or {}).get("state")
            return state == "open"
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Erro ao testar conexão: {e}")
            return False
