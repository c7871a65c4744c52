"""
Firestore Service - Persistência de dados

Estrutura:
    users/{sender_id}
    users/{sender_id}/transactions/{id}
    users/{sender_id}/items/{id}
    users/{sender_id}/water_intake/{id}

O id do documento do usuário é o próprio identificador do WhatsApp,
o que garante unicidade mesmo com mensagens simultâneas do mesmo remetente.
"""
import logging
from datetime import datetime
from typing import Any, List, Optional

from google.api_core.exceptions import AlreadyExists, GoogleAPICallError
from google.cloud import firestore

from hz_solucoes.core.exceptions import StoreError
from hz_solucoes.core.utils import ensure_string_id
from hz_solucoes.models.finance import (
    ShoppingItem,
    Transaction,
    User,
    WaterIntakeEntry,
)
from hz_solucoes.services.google_auth import GoogleAuth

logger = logging.getLogger(__name__)

USERS = 'users'
TRANSACTIONS = 'transactions'
ITEMS = 'items'
WATER_INTAKE = 'water_intake'


class FirestoreService:
    """Serviço de persistência no Firestore"""

    def __init__(self, client: Optional[firestore.Client] = None):
        self.db = client if client is not None else GoogleAuth.get_firestore_client()

    def _user_ref(self, user_id: Any):
        if not self.db:
            raise StoreError("Firestore não disponível")
        return self.db.collection(USERS).document(ensure_string_id(user_id))

    # --- USUÁRIOS ---
    def get_user(self, sender_id: Any) -> Optional[User]:
        """Busca usuário pelo identificador do WhatsApp"""
        try:
            doc = self._user_ref(sender_id).get()
        except GoogleAPICallError as e:
            raise StoreError(f"Erro ao buscar usuário: {e}") from e

        if not doc.exists:
            return None
        return User(id=doc.id, **doc.to_dict())

    def create_user(self, sender_id: Any, name: str, password: str) -> None:
        """
        Cria usuário. Se outro processo criou o mesmo usuário antes,
        AlreadyExists é ignorado.
        """
        sender_id_str = ensure_string_id(sender_id)
        try:
            self._user_ref(sender_id_str).create({
                'whatsapp': sender_id_str,
                'name': name,
                'password': password,
                'created_at': datetime.now()
            })
            logger.info(f"Usuário criado: {sender_id_str}")
        except AlreadyExists:
            logger.info(f"Usuário {sender_id_str} já existe, ignorando criação")
        except GoogleAPICallError as e:
            raise StoreError(f"Erro ao criar usuário: {e}") from e

    # --- FINANCEIRO ---
    def add_transaction(self, transaction: Transaction) -> str:
        """Adiciona receita ou despesa"""
        try:
            _, ref = self._user_ref(transaction.user_id).collection(TRANSACTIONS).add(
                transaction.model_dump(exclude={'id'})
            )
        except GoogleAPICallError as e:
            raise StoreError(f"Erro ao salvar transação: {e}") from e
        return ref.id

    def get_transactions(
        self,
        user_id: Any,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[Transaction]:
        """Retorna transações do período, mais recentes primeiro"""
        query = self._user_ref(user_id).collection(TRANSACTIONS)
        if start_date:
            query = query.where(filter=firestore.FieldFilter('date', '>=', start_date))
        if end_date:
            query = query.where(filter=firestore.FieldFilter('date', '<=', end_date))
        query = query.order_by('date', direction=firestore.Query.DESCENDING)
        if limit:
            query = query.limit(limit)

        try:
            return [Transaction(id=doc.id, **doc.to_dict()) for doc in query.stream()]
        except GoogleAPICallError as e:
            raise StoreError(f"Erro ao buscar transações: {e}") from e

    # --- LISTA DE COMPRAS ---
    def add_shopping_item(self, item: ShoppingItem) -> str:
        """Adiciona item à lista de compras"""
        try:
            _, ref = self._user_ref(item.user_id).collection(ITEMS).add(
                item.model_dump(exclude={'id'})
            )
        except GoogleAPICallError as e:
            raise StoreError(f"Erro ao salvar item: {e}") from e
        return ref.id

    def get_shopping_items(self, user_id: Any) -> List[ShoppingItem]:
        """Retorna todos os itens, na ordem em que foram adicionados"""
        query = (
            self._user_ref(user_id)
            .collection(ITEMS)
            .order_by('created_at')
        )
        try:
            return [ShoppingItem(id=doc.id, **doc.to_dict()) for doc in query.stream()]
        except GoogleAPICallError as e:
            raise StoreError(f"Erro ao buscar itens: {e}") from e

    # --- ÁGUA ---
    def add_water_intake(self, entry: WaterIntakeEntry) -> str:
        """Registra consumo de água"""
        try:
            _, ref = self._user_ref(entry.user_id).collection(WATER_INTAKE).add(
                entry.model_dump(exclude={'id'})
            )
        except GoogleAPICallError as e:
            raise StoreError(f"Erro ao registrar água: {e}") from e
        return ref.id

    def get_water_intake(self, user_id: Any, start_date: datetime, end_date: datetime) -> List[WaterIntakeEntry]:
        """Retorna registros de água no período"""
        query = (
            self._user_ref(user_id)
            .collection(WATER_INTAKE)
            .where(filter=firestore.FieldFilter('date', '>=', start_date))
            .where(filter=firestore.FieldFilter('date', '<=', end_date))
        )
        try:
            return [WaterIntakeEntry(id=doc.id, **doc.to_dict()) for doc in query.stream()]
        except GoogleAPICallError as e:
            raise StoreError(f"Erro ao buscar registros de água: {e}") from e
