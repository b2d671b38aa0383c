# src/main.py
"""
Aplicação Principal - Franchise Manager API
===========================================
Fornecedores, lojas, kits, chamados e checklist de instalação da rede.
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.middleware.cors import CORSMiddleware

from src.api.admin import router as admin_router
from src.core import models
from src.core.config import config
from src.core.database import GetDBDep, check_database_health, engine
from src.core.db_initialization import seed_bootstrap_admin, seed_sample_data
from src.core.exceptions import register_exception_handlers
from src.core.middleware.correlation import CorrelationIdMiddleware

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gerencia ciclo de vida da aplicação"""

    logger.info("=" * 60)
    logger.info("🚀 INICIANDO FRANCHISE MANAGER API")
    logger.info("=" * 60)
    logger.info(f"🌍 Ambiente: {config.ENVIRONMENT}")

    # STARTUP: falha de banco aqui interrompe a inicialização
    logger.info("📊 Criando tabelas do banco de dados...")
    models.Base.metadata.create_all(bind=engine)

    with Session(bind=engine) as db_session:
        logger.info("📋 Verificando dados essenciais...")
        seed_bootstrap_admin(db_session)

        if config.SEED_SAMPLE_DATA:
            seed_sample_data(db_session)

        logger.info("✅ Seeding concluído")

    logger.info("✅ APLICAÇÃO PRONTA!")
    logger.info("=" * 60)

    yield

    # SHUTDOWN
    logger.info("🛑 DESLIGANDO APLICAÇÃO")
    engine.dispose()
    logger.info("✅ Pool de conexões encerrado")


# ✅ CRIA APLICAÇÃO
app = FastAPI(
    title="Franchise Manager API",
    version=APP_VERSION,
    lifespan=lifespan
)

app.add_middleware(CorrelationIdMiddleware)
register_exception_handlers(app)


# ═══════════════════════════════════════════════════════════
# CORS - CONFIGURAÇÃO POR AMBIENTE
# ═══════════════════════════════════════════════════════════

if config.is_development:
    # 🟢 DESENVOLVIMENTO: Permite tudo
    logger.info("🟢 MODO DESENVOLVIMENTO: CORS permissivo")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    static_origins = config.get_allowed_origins_list()
    logger.info(f"🔴 CORS restritivo: {len(static_origins)} origem(ns)")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=static_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Correlation-ID"],
        expose_headers=["X-Correlation-ID"],
        max_age=3600,
    )


# ═══════════════════════════════════════════════════════════
# ROTAS
# ═══════════════════════════════════════════════════════════

app.include_router(admin_router)


@app.get("/health", tags=["Health"])
def health_check(db: GetDBDep):
    """Health check: ping no banco e estatísticas do pool"""
    database = check_database_health(db)
    body = {
        "status": "healthy" if database["healthy"] else "unhealthy",
        "version": APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": database,
    }
    return JSONResponse(status_code=200 if database["healthy"] else 503, content=body)


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
