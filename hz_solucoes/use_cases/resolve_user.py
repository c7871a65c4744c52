"""
Resolve User Use Case
"""
import logging
from typing import Optional

from hz_solucoes.core.config import BotConfig
from hz_solucoes.core.exceptions import UserResolutionError
from hz_solucoes.core.utils import default_user_name, ensure_string_id
from hz_solucoes.models.finance import User
from hz_solucoes.services.firestore_service import FirestoreService

logger = logging.getLogger(__name__)


class ResolveUserUseCase:
    """Busca o usuário do remetente, criando-o no primeiro contato"""

    def __init__(self, db: Optional[FirestoreService] = None, config: Optional[BotConfig] = None):
        self.db = db or FirestoreService()
        self.config = config or BotConfig()

    def execute(self, sender_id: str) -> User:
        """
        Returns:
            User: usuário associado ao remetente

        Raises:
            UserResolutionError: falha no Firestore ou usuário ausente após a criação
        """
        sender_id_str = ensure_string_id(sender_id)
        try:
            user = self.db.get_user(sender_id_str)
            if user:
                return user

            logger.info(f"Criando novo usuário para: {sender_id_str}")
            self.db.create_user(
                sender_id_str,
                name=default_user_name(sender_id_str),
                password=self.config.default_user_password,
            )
            user = self.db.get_user(sender_id_str)
        except Exception as e:
            raise UserResolutionError(f"Erro ao resolver usuário {sender_id_str}: {e}") from e

        if not user:
            raise UserResolutionError(f"Failed to create user {sender_id_str}")
        return user
