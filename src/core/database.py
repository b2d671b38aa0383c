"""
Database Layer
==============
Engine único com pool de conexões de tamanho fixo.

Características:
- ✅ Pool de tamanho fixo (requisições excedentes aguardam na fila)
- ✅ Uma sessão por requisição, com rollback em erro
- ✅ Health check e estatísticas do pool
- ❌ Sem retry automático: uma falha de banco falha a requisição
"""

import logging
import time
from typing import Annotated

from fastapi import Depends
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool, NullPool

from src.core.config import config
from src.core.exceptions import FranchiseError

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════
# ENGINE CONFIGURATION
# ═══════════════════════════════════════════════════════════

def get_engine_config() -> dict:
    """
    Retorna configuração do engine baseada no ambiente

    Returns:
        dict: Configuração do SQLAlchemy engine
    """
    connect_args = {}
    if config.is_sqlite:
        # A sessão é usada pela threadpool do FastAPI
        connect_args["check_same_thread"] = False

    if config.is_test:
        return {
            "poolclass": NullPool,
            "echo": False,
            "connect_args": connect_args,
        }

    return {
        "poolclass": QueuePool,
        "pool_size": config.DB_POOL_SIZE,
        "max_overflow": 0,  # Pool fixo: excedentes esperam pool_timeout
        "pool_timeout": config.DB_POOL_TIMEOUT,
        "pool_recycle": config.DB_POOL_RECYCLE,
        "pool_pre_ping": True,
        "echo": config.DEBUG,
        "connect_args": connect_args,
    }


engine_config = get_engine_config()
engine = create_engine(config.DATABASE_URL, **engine_config)


# ═══════════════════════════════════════════════════════════
# EVENT LISTENERS PARA MONITORAMENTO
# ═══════════════════════════════════════════════════════════

@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    """Executado quando uma nova conexão é criada"""
    logger.debug("🔵 Nova conexão criada no pool")


@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    """Executado quando uma conexão é retirada do pool"""
    if config.is_production:
        stats = get_pool_stats()
        if stats["utilization_percent"] > 90:
            logger.warning(
                f"⚠️ POOL CRÍTICO: {stats['utilization_percent']}% utilizado | "
                f"{stats['checked_out']}/{stats['max_connections']} conexões"
            )


# ═══════════════════════════════════════════════════════════
# SESSION MAKER
# ═══════════════════════════════════════════════════════════

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False
)


# ═══════════════════════════════════════════════════════════
# DATABASE DEPENDENCIES
# ═══════════════════════════════════════════════════════════

def get_db():
    """
    Dependency com uma sessão por requisição

    - ✅ Rollback em erro
    - ✅ Logging de exceções
    - ✅ Sessão sempre fechada
    """
    db = SessionLocal()
    try:
        yield db
    except FranchiseError:
        # Erros de domínio já são tratados pelos exception handlers
        db.rollback()
        raise
    except Exception as e:
        logger.error(f"❌ Erro na sessão: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


GetDBDep = Annotated[Session, Depends(get_db)]


# ═══════════════════════════════════════════════════════════
# MONITORING E HEALTH CHECKS
# ═══════════════════════════════════════════════════════════

def get_pool_stats(engine_instance=None) -> dict:
    """
    Retorna estatísticas do pool de conexões

    Args:
        engine_instance: Engine específico (padrão: engine principal)

    Returns:
        dict: Estatísticas do pool
    """
    if engine_instance is None:
        engine_instance = engine

    pool = engine_instance.pool

    checked_out = pool.checkedout() if hasattr(pool, 'checkedout') else 0
    size = pool.size() if hasattr(pool, 'size') else 0
    max_connections = engine_config.get("pool_size", 0) + engine_config.get("max_overflow", 0)

    return {
        "pool_class": type(pool).__name__,
        "pool_size": size,
        "checked_out": checked_out,
        "max_connections": max_connections,
        "utilization_percent": round((checked_out / max_connections) * 100, 2) if max_connections > 0 else 0,
        "available_connections": max(0, max_connections - checked_out),
    }


def check_database_health(db: Session) -> dict:
    """
    Verifica saúde do banco de dados com a sessão informada

    Returns:
        dict: Status de saúde detalhado
    """
    health_status = {
        "healthy": True,
        "timestamp": time.time(),
        "checks": {}
    }

    started = time.perf_counter()
    try:
        db.execute(text("SELECT 1")).scalar()
        health_status["checks"]["connection"] = {
            "status": "healthy",
            "latency_ms": round((time.perf_counter() - started) * 1000, 2)
        }
    except Exception as e:
        logger.error(f"❌ Database health check failed: {e}")
        health_status["healthy"] = False
        health_status["checks"]["connection"] = {"status": "unhealthy"}

    pool_stats = get_pool_stats()
    health_status["checks"]["pool"] = pool_stats

    if pool_stats["utilization_percent"] > 90:
        health_status["checks"]["pool"]["warning"] = "Pool utilization critical"

    return health_status
