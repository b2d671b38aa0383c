"""
Ponto de entrada - Franchise Manager API
========================================
Executa o servidor Uvicorn com as configurações do .env
"""

import logging

import uvicorn

from src.core.config import config

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════
# MAIN
# ═══════════════════════════════════════════════════════════

def main():
    """Função principal para executar o servidor"""

    # Um único worker: o pool de conexões é limitado por processo
    uvicorn_config = {
        "app": "src.main:app",
        "host": config.HOST,
        "port": config.PORT,
        "reload": config.DEBUG,
        "log_level": config.LOG_LEVEL.lower(),
        "access_log": config.DEBUG,
    }

    logger.info(f"🌐 Servidor iniciando em http://{config.HOST}:{config.PORT}")
    uvicorn.run(**uvicorn_config)


if __name__ == "__main__":
    main()
