# Arquivo: src/core/db_initialization.py

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from src.core import models
from src.core.config import config
from src.core.security.security import get_password_hash
from src.core.utils.validators import normalize_cnpj

logger = logging.getLogger(__name__)


def seed_bootstrap_admin(db: Session) -> models.Admin | None:
    """
    Cria o administrador inicial a partir do .env quando a tabela está vazia.

    Sem BOOTSTRAP_ADMIN_EMAIL/PASSWORD nada é feito: nenhuma credencial
    padrão é embutida no código.
    """
    if not config.BOOTSTRAP_ADMIN_EMAIL or not config.BOOTSTRAP_ADMIN_PASSWORD:
        logger.info("ℹ️ Administrador inicial não configurado")
        return None

    if db.scalar(select(func.count(models.Admin.id))):
        logger.info("✅ Já existem administradores cadastrados")
        return None

    admin = models.Admin(
        name=config.BOOTSTRAP_ADMIN_NAME,
        email=config.BOOTSTRAP_ADMIN_EMAIL.lower(),
        hashed_password=get_password_hash(config.BOOTSTRAP_ADMIN_PASSWORD),
    )
    db.add(admin)
    db.commit()
    logger.info(f"✨ Administrador inicial criado: {admin.email}")
    return admin


SAMPLE_SUPPLIERS = [
    {
        'name': 'SuperTech Supplies', 'cnpj': '12345678000190', 'responsible_name': 'João Silva',
        'phone': '(11) 99999-9999', 'address': 'Rua das Flores, 123', 'budget': Decimal('15000.00'),
    },
    {
        'name': 'ABC Ferramentas', 'cnpj': '98765432000110', 'responsible_name': 'Maria Costa',
        'phone': '(11) 88888-8888', 'address': 'Av. Industrial, 456', 'budget': Decimal('25000.00'),
    },
]

SAMPLE_STORES = [
    {
        'code': '51974', 'name': 'HELP INFORMATICA', 'operator_name': 'Maria Santos',
        'street': 'Rua Principal', 'number': '100', 'complement': None, 'neighborhood': 'Centro',
        'city': 'São Paulo', 'state': 'SP', 'zip_code': '01010-000', 'region': 'Sudeste',
        'phone': '(11) 1111-1111',
    },
    {
        'code': '51975', 'name': 'Loja Norte', 'operator_name': 'Pedro Costa',
        'street': 'Av. Norte', 'number': '200', 'complement': 'Sala 2', 'neighborhood': 'Vila Norte',
        'city': 'São Paulo', 'state': 'SP', 'zip_code': '02020-000', 'region': 'Sudeste',
        'phone': '(11) 2222-2222',
    },
    {
        'code': '51976', 'name': 'Loja Sul', 'operator_name': 'Ana Oliveira',
        'street': 'Rua Sul', 'number': '300', 'complement': None, 'neighborhood': 'Jardim Sul',
        'city': 'São Paulo', 'state': 'SP', 'zip_code': '03030-000', 'region': 'Sudeste',
        'phone': '(11) 3333-3333',
    },
]

SAMPLE_KITS = [
    {'part_name': 'Kit de Instalação Básico', 'description': 'Suportes, cabos e parafusos', 'store_code': '51974'},
    {'part_name': 'Kit de Instalação Completo', 'description': 'Kit básico com painel e iluminação',
     'store_code': '51975'},
]


def seed_sample_data(db: Session) -> None:
    """Dados de demonstração; cada tabela só é semeada se estiver vazia"""
    if not db.scalar(select(func.count(models.Supplier.id))):
        db.add_all(
            models.Supplier(**data, cnpj_digits=normalize_cnpj(data['cnpj'])) for data in SAMPLE_SUPPLIERS
        )
        db.commit()
        logger.info(f"✨ {len(SAMPLE_SUPPLIERS)} fornecedores de exemplo criados")

    if not db.scalar(select(func.count(models.Store.id))):
        db.add_all(models.Store(**data) for data in SAMPLE_STORES)
        db.commit()
        logger.info(f"✨ {len(SAMPLE_STORES)} lojas de exemplo criadas")

    if not db.scalar(select(func.count(models.Kit.id))):
        db.add_all(models.Kit(**data) for data in SAMPLE_KITS)
        db.commit()
        logger.info(f"✨ {len(SAMPLE_KITS)} kits de exemplo criados")
