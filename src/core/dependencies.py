# src/core/dependencies.py

from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends

from src.core import models
from src.core.database import GetDBDep
from src.core.exceptions import AuthenticationError, PermissionDeniedError
from src.core.security.security import oauth2_scheme, verify_access_token
from src.core.utils.enums import PrincipalRole


@dataclass
class Principal:
    """Quem está fazendo a requisição: administrador, fornecedor ou loja"""
    role: PrincipalRole
    subject: str
    name: str
    entity: Any

    @property
    def is_admin(self) -> bool:
        return self.role == PrincipalRole.ADMIN


def _load_entity(db, role: PrincipalRole, subject: str):
    if role == PrincipalRole.STORE:
        return db.query(models.Store).filter(models.Store.code == subject).first()

    if not subject.isdigit():
        return None

    model = models.Admin if role == PrincipalRole.ADMIN else models.Supplier
    return db.get(model, int(subject))


def get_current_principal(
        db: GetDBDep,
        token: Annotated[str | None, Depends(oauth2_scheme)],
) -> Principal:
    """
    Valida o token de sessão e recarrega a entidade do banco.

    Token ausente, inválido, expirado ou de uma entidade removida → 401.
    """
    if not token:
        raise AuthenticationError("Não autenticado")

    payload = verify_access_token(token)
    if not payload:
        raise AuthenticationError("Token inválido ou expirado")

    role = PrincipalRole(payload["role"])
    subject = payload["sub"]

    entity = _load_entity(db, role, subject)
    if entity is None:
        raise AuthenticationError("Sessão não corresponde a um usuário ativo")

    return Principal(role=role, subject=subject, name=entity.name, entity=entity)


def get_current_admin(principal: Annotated[Principal, Depends(get_current_principal)]) -> Principal:
    if not principal.is_admin:
        raise PermissionDeniedError("Acesso negado. Requer privilégios de administrador.")
    return principal


# ✅ Type annotations para usar com Depends()
GetCurrentPrincipalDep = Annotated[Principal, Depends(get_current_principal)]
GetCurrentAdminDep = Annotated[Principal, Depends(get_current_admin)]
