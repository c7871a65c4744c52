import logging
from fastapi import FastAPI

from hz_solucoes.routers import web_api, whatsapp

# --- CONFIGURAÇÕES ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="HZ Soluções", version="1.0.0")

app.include_router(whatsapp.router)
app.include_router(web_api.router)


# --- ROTAS ---
@app.get("/")
def home():
    return {"status": "HZ Soluções Online"}
