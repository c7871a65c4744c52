"""
Web API Router - Consultas para o frontend
"""
import logging
from fastapi import APIRouter, HTTPException, Query

from hz_solucoes.core.exceptions import StoreError
from hz_solucoes.core.utils import ensure_string_id
from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.use_cases.list_transactions import ListTransactionsUseCase
from hz_solucoes.use_cases.monthly_report import MonthlyReportUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["web"])

db = FirestoreService()

# Use cases
monthly_report_uc = MonthlyReportUseCase(db)
list_transactions_uc = ListTransactionsUseCase(db)


def _require_user(sender_id: str) -> str:
    sender_id_str = ensure_string_id(sender_id)
    try:
        user = db.get_user(sender_id_str)
    except StoreError as e:
        logger.error(f"Erro ao buscar usuário: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    if not user:
        raise HTTPException(status_code=404, detail="Usuário não encontrado")
    return user.id


@router.get("/health")
def health():
    """Health check endpoint"""
    return {"status": "ok", "service": "HZ Soluções API"}


@router.get("/users/{sender_id}/summary")
def get_monthly_summary(
    sender_id: str,
    year: int = Query(None, ge=2000, le=9999),
    month: int = Query(None, ge=1, le=12),
):
    """Resumo do mês: receitas, despesas, saldo e despesas por categoria"""
    if (year is None) != (month is None):
        raise HTTPException(status_code=400, detail="Informe year e month juntos")
    user_id = _require_user(sender_id)
    try:
        result = monthly_report_uc.execute(user_id, year=year, month=month)
    except StoreError as e:
        logger.error(f"Erro no resumo mensal: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return result["summary"].model_dump()


@router.get("/users/{sender_id}/transactions")
def get_transactions(sender_id: str, limit: int = Query(10, ge=1, le=100)):
    """Lista transações mais recentes"""
    user_id = _require_user(sender_id)
    try:
        result = list_transactions_uc.execute(user_id, limit=limit)
    except StoreError as e:
        logger.error(f"Erro ao listar transações: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return {"transactions": [t.model_dump(mode="json") for t in result["transactions"]]}
