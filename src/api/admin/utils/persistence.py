# src/api/admin/utils/persistence.py

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.core.exceptions import ConflictError

logger = logging.getLogger(__name__)


def commit_or_conflict(db: Session, conflict_message: str, instance=None):
    """
    Faz commit e, se houver violação de constraint, desfaz e levanta ConflictError.

    Args:
        db: Sessão do banco de dados
        conflict_message: Mensagem devolvida ao cliente em caso de conflito
        instance: Objeto a recarregar após o commit (opcional)
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"⚠️ Violação de integridade: {e.orig}")
        raise ConflictError(conflict_message) from e

    if instance is not None:
        db.refresh(instance)
    return instance
