from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

# Texto obrigatório: espaços nas pontas são removidos e vazio é rejeitado
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class AppBaseModel(BaseModel):
    # Configuração padrão para todos os nossos schemas
    model_config = ConfigDict(
        from_attributes=True,  # Permite criar schemas a partir de objetos ORM
        extra="forbid"
    )
