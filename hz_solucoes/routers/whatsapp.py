"""
WhatsApp Router - Webhook endpoint
"""
import logging
from fastapi import APIRouter, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

from hz_solucoes.core.config import BotConfig, WHATSAPP_VERIFY_TOKEN
from hz_solucoes.core.exceptions import UserResolutionError
from hz_solucoes.models.whatsapp import UserInfo, WebhookResponse, extract_message, is_own_message
from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.services.interpreter import CommandInterpreter
from hz_solucoes.services.whatsapp_service import WhatsAppService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/whatsapp", tags=["whatsapp"])

# Instâncias dos serviços
db = FirestoreService()
whatsapp = WhatsAppService()
interpreter = CommandInterpreter(db, BotConfig.from_env())


def send_reply(sender: str, text: str) -> None:
    """Entrega a resposta; falhas são apenas registradas"""
    if whatsapp.send_message(sender, text):
        logger.info(f"Resposta enviada para {sender}")
    else:
        logger.warning(f"Não foi possível enviar a resposta para {sender}")


@router.get("/webhook")
def verify_webhook(
    mode: str = Query(None, alias="hub.mode"),
    token: str = Query(None, alias="hub.verify_token"),
    challenge: str = Query(None, alias="hub.challenge"),
):
    """Verificação de webhook da WhatsApp Cloud API (Meta)"""
    logger.info(f"Verificação recebida: mode={mode}, token={'***' if token else 'missing'}")

    if mode == "subscribe" and challenge:
        if not WHATSAPP_VERIFY_TOKEN:
            logger.warning("WHATSAPP_VERIFY_TOKEN não configurado - aceitando qualquer token")
            return PlainTextResponse(challenge)
        if token == WHATSAPP_VERIFY_TOKEN:
            return PlainTextResponse(challenge)

    logger.info("Verificação falhou")
    return PlainTextResponse("Forbidden", status_code=403)


@router.post("/webhook")
async def webhook(request: Request):
    """Endpoint principal do webhook do WhatsApp"""
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if is_own_message(payload):
        logger.info("Mensagem enviada pelo próprio bot - ignorando")
        return WebhookResponse(success=True, ignored=True).model_dump(exclude_none=True)

    message = extract_message(payload)
    if not message:
        logger.warning("Não foi possível extrair mensagem do payload")
        return JSONResponse(
            status_code=400,
            content=WebhookResponse(success=False, error="Missing from or body").model_dump(exclude_none=True),
        )

    logger.info(f"Processando mensagem de {message.sender}: {message.body}")

    try:
        outcome = await run_in_threadpool(interpreter.execute, message.sender, message.body)
    except UserResolutionError as e:
        logger.error(f"ERRO AO RESOLVER USUÁRIO: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=WebhookResponse(success=False, error=str(e)).model_dump(exclude_none=True),
        )

    await run_in_threadpool(send_reply, message.sender, outcome.reply)

    user = UserInfo(id=outcome.user.id, name=outcome.user.name, whatsapp=outcome.user.whatsapp)
    if outcome.failed:
        return JSONResponse(
            status_code=500,
            content=WebhookResponse(
                success=False, response=outcome.reply, user=user, error=outcome.error
            ).model_dump(exclude_none=True),
        )

    return WebhookResponse(success=True, response=outcome.reply, user=user).model_dump(exclude_none=True)


@router.get("/test")
def test_connection():
    """Verifica configuração e conexão com a Evolution API"""
    configured = whatsapp.is_configured()
    connected = whatsapp.test_connection() if configured else False
    return {
        "configured": configured,
        "connected": connected,
        "message": (
            "✅ Evolution API configurada e conectada"
            if connected
            else "❌ Evolution API não configurada ou desconectada"
        ),
    }
