"""
Core configuration and environment variables
"""
import os
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

# Environment Variables
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS")
FIREBASE_KEY_FILE = os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "firebase-key.json")
FIRESTORE_PROJECT = os.getenv("FIRESTORE_PROJECT")

# Evolution API (gateway principal)
EVOLUTION_API_URL = os.getenv("EVOLUTION_API_URL", "http://localhost:8080")
EVOLUTION_INSTANCE_NAME = os.getenv("EVOLUTION_INSTANCE_NAME", "hzsolucoes")
EVOLUTION_API_KEY = os.getenv("EVOLUTION_API_KEY", "")

# WhatsApp Business Cloud API (Meta) - fallback
WHATSAPP_API_VERSION = os.getenv("WHATSAPP_API_VERSION", "v20.0")
WHATSAPP_PHONE_ID = os.getenv("WHATSAPP_PHONE_ID")
WHATSAPP_ACCESS_TOKEN = os.getenv("WHATSAPP_ACCESS_TOKEN")
WHATSAPP_VERIFY_TOKEN = os.getenv("WHATSAPP_VERIFY_TOKEN")

# Bot
DEFAULT_USER_PASSWORD = os.getenv("DEFAULT_USER_PASSWORD", "whatsapp-auth")
DAILY_WATER_GOAL_ML = int(os.getenv("DAILY_WATER_GOAL_ML", "2000"))
DEFAULT_WATER_ML = int(os.getenv("DEFAULT_WATER_ML", "200"))
RECENT_TRANSACTIONS_LIMIT = int(os.getenv("RECENT_TRANSACTIONS_LIMIT", "10"))


class BotConfig(BaseModel):
    """Parâmetros do interpretador de comandos"""
    default_user_password: str = "whatsapp-auth"
    daily_water_goal_ml: int = 2000
    default_water_ml: int = 200
    recent_transactions_limit: int = 10

    @classmethod
    def from_env(cls) -> "BotConfig":
        return cls(
            default_user_password=DEFAULT_USER_PASSWORD,
            daily_water_goal_ml=DAILY_WATER_GOAL_ML,
            default_water_ml=DEFAULT_WATER_ML,
            recent_transactions_limit=RECENT_TRANSACTIONS_LIMIT,
        )
