# src/core/config.py
"""
Configurações da Aplicação - Franchise Manager
==============================================

Gerencia variáveis de ambiente de forma centralizada e tipada.
"""

from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Carrega .env do diretório raiz
load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent.parent / ".env")


class Config(BaseSettings):
    """Configurações centralizadas da aplicação"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════
    # 🌍 AMBIENTE
    # ═══════════════════════════════════════════════════════════

    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # ═══════════════════════════════════════════════════════════
    # 🗄️ BANCO DE DADOS
    # ═══════════════════════════════════════════════════════════

    DATABASE_URL: str = "sqlite:///./franchise.db"
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 30  # segundos aguardando uma conexão livre
    DB_POOL_RECYCLE: int = 1800

    # ═══════════════════════════════════════════════════════════
    # 🔐 JWT (SESSÕES)
    # ═══════════════════════════════════════════════════════════

    SECRET_KEY: str = "change-me-in-production-change-me-now"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Primeiro administrador, criado no startup se não houver nenhum
    BOOTSTRAP_ADMIN_NAME: str = "Administrador"
    BOOTSTRAP_ADMIN_EMAIL: Optional[str] = None
    BOOTSTRAP_ADMIN_PASSWORD: Optional[str] = None

    SEED_SAMPLE_DATA: bool = False

    # ═══════════════════════════════════════════════════════════
    # 📸 INSTALAÇÕES / DASHBOARD
    # ═══════════════════════════════════════════════════════════

    INSTALLATION_MAX_PHOTOS: int = 6
    DASHBOARD_MONTHS: int = 6
    DASHBOARD_KIT_SAMPLE_SIZE: int = 10

    # ═══════════════════════════════════════════════════════════
    # 🌐 CORS
    # ═══════════════════════════════════════════════════════════

    ALLOWED_ORIGINS: str = "http://localhost:5173"

    def get_allowed_origins_list(self) -> list[str]:
        """Retorna lista de origens permitidas para CORS"""
        origins = [
            origin.strip()
            for origin in self.ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]

        if self.is_development:
            origins.extend([
                "http://localhost:5173",
                "http://localhost:3000",
                "http://127.0.0.1:5173",
            ])

        # Remove duplicatas mantendo ordem
        return list(dict.fromkeys(origins))

    # ═══════════════════════════════════════════════════════════
    # 🖥️ SERVIDOR
    # ═══════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════
    # 🔧 PROPRIEDADES ÚTEIS
    # ═══════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def is_test(self) -> bool:
        return self.ENVIRONMENT.lower() == "test"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# ✅ Instância global
config = Config()


def validate_config(cfg: Config = config):
    """Valida configurações críticas"""
    errors = []

    if cfg.ENVIRONMENT.lower() not in ["development", "test", "production"]:
        errors.append("ENVIRONMENT deve ser: development, test ou production")

    if not cfg.is_test and len(cfg.SECRET_KEY) < 32:
        errors.append("SECRET_KEY muito curta (mínimo 32 caracteres)")

    if cfg.is_production and cfg.SECRET_KEY.startswith("change-me"):
        errors.append("SECRET_KEY padrão não pode ser usada em produção")

    if cfg.DB_POOL_SIZE < 1:
        errors.append("DB_POOL_SIZE deve ser maior que zero")

    if cfg.INSTALLATION_MAX_PHOTOS < 1:
        errors.append("INSTALLATION_MAX_PHOTOS deve ser maior que zero")

    if bool(cfg.BOOTSTRAP_ADMIN_EMAIL) != bool(cfg.BOOTSTRAP_ADMIN_PASSWORD):
        errors.append("BOOTSTRAP_ADMIN_EMAIL e BOOTSTRAP_ADMIN_PASSWORD devem ser definidos juntos")

    if errors:
        raise ValueError(
            "❌ Erros de configuração:\n" + "\n".join(f"  • {e}" for e in errors)
        )


validate_config()
