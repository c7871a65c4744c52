"""
Firestore client factory (Singleton)

Ordem de busca das credenciais da conta de serviço:
1. FIREBASE_CREDENTIALS com o JSON inline (deploy em container)
2. arquivo apontado por GOOGLE_APPLICATION_CREDENTIALS (padrão firebase-key.json)
"""
import os
import json
import logging
from typing import Optional
from google.oauth2 import service_account
from google.cloud import firestore

from hz_solucoes.core import config

logger = logging.getLogger(__name__)

DATASTORE_SCOPE = "https://www.googleapis.com/auth/datastore"


class GoogleAuth:
    """Mantém uma única conexão com o Firestore por processo"""

    _credentials: Optional[service_account.Credentials] = None
    _firestore_client: Optional[firestore.Client] = None

    @staticmethod
    def _load_credentials() -> Optional[service_account.Credentials]:
        if config.FIREBASE_CREDENTIALS:
            info = json.loads(config.FIREBASE_CREDENTIALS)
            return service_account.Credentials.from_service_account_info(
                info, scopes=[DATASTORE_SCOPE]
            )
        if config.FIREBASE_KEY_FILE and os.path.exists(config.FIREBASE_KEY_FILE):
            return service_account.Credentials.from_service_account_file(
                config.FIREBASE_KEY_FILE, scopes=[DATASTORE_SCOPE]
            )
        logger.warning("Nenhuma credencial do Firebase encontrada")
        return None

    @classmethod
    def get_credentials(cls) -> Optional[service_account.Credentials]:
        if cls._credentials is None:
            try:
                cls._credentials = cls._load_credentials()
            except (ValueError, OSError) as e:
                logger.error(f"❌ Credenciais do Firebase inválidas: {e}")
        return cls._credentials

    @classmethod
    def get_firestore_client(cls) -> Optional[firestore.Client]:
        """Cliente Firestore, ou None sem credenciais (o FirestoreService vira StoreError)"""
        if cls._firestore_client is not None:
            return cls._firestore_client

        creds = cls.get_credentials()
        if creds is None:
            return None

        project = config.FIRESTORE_PROJECT or creds.project_id
        logger.info(f"Conectando ao Firestore (projeto {project})")
        cls._firestore_client = firestore.Client(project=project, credentials=creds)
        return cls._firestore_client

    @classmethod
    def reset(cls) -> None:
        cls._credentials = None
        cls._firestore_client = None
