"""
WhatsApp Models
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel


class InboundMessage(BaseModel):
    """Mensagem normalizada: remetente + texto"""
    sender: str
    body: str


class UserInfo(BaseModel):
    id: str
    name: str
    whatsapp: str


class WebhookResponse(BaseModel):
    """Modelo de resposta do webhook"""
    success: bool
    response: Optional[str] = None
    user: Optional[UserInfo] = None
    error: Optional[str] = None
    ignored: Optional[bool] = None


def _first(items: Any) -> Dict[str, Any]:
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return {}


def is_own_message(payload: Any) -> bool:
    """
    Anti-Loop: a Evolution API reenvia ao webhook as mensagens enviadas pelo
    próprio bot (data.key.fromMe). Essas mensagens nunca são processadas.
    """
    if not isinstance(payload, dict):
        return False
    data = payload.get("data")
    if not isinstance(data, dict):
        return False
    return bool((data.get("key") or {}).get("fromMe"))


def extract_message(payload: Any) -> Optional[InboundMessage]:
    """
    Extrai (from, body) dos formatos aceitos:
    - WhatsApp Cloud API (Meta): entry[0].changes[0].value.{messages,contacts}
    - Evolution API: data.key.remoteJid + data.message.conversation
    - Genérico: {"from": ..., "body": ...}
    Mensagens da Meta sem texto (imagem, áudio) seguem com body vazio e
    viram comando não reconhecido. Nos demais formatos, retorna None se
    não houver remetente e texto.
    """
    if not isinstance(payload, dict):
        return None

    # Meta
    value = _first(_first(payload.get("entry")).get("changes")).get("value") or {}
    message = _first(value.get("messages"))
    contact = _first(value.get("contacts"))
    if message and contact:
        sender = contact.get("wa_id")
        body = ""
        if message.get("type") == "text":
            body = (message.get("text") or {}).get("body", "")
        elif message.get("type") == "interactive":
            interactive = message.get("interactive") or {}
            body = (
                (interactive.get("button_reply") or {}).get("title")
                or (interactive.get("list_reply") or {}).get("title")
                or ""
            )
        if sender:
            return InboundMessage(sender=str(sender), body=body or "")
        return None

    # Evolution API
    data = payload.get("data")
    if isinstance(data, dict):
        if is_own_message(payload):
            return None
        sender = (data.get("key") or {}).get("remoteJid") or data.get("from")
        msg = data.get("message") or {}
        body = (
            msg.get("conversation")
            or (msg.get("extendedTextMessage") or {}).get("text")
            or data.get("body")
        )
        if sender and body:
            return InboundMessage(sender=str(sender), body=str(body))

    # Genérico
    sender = payload.get("from")
    body = payload.get("body")
    if sender and body:
        return InboundMessage(sender=str(sender), body=str(body))

    return None
