"""
Validadores de dados brasileiros
=================================
Normalização de CNPJ, CEP e UF e validação das fotos de instalação.
"""

import base64
import binascii
import re

BRAZILIAN_STATES = frozenset({
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS", "MG", "PA",
    "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
})

_DATA_URL_PATTERN = re.compile(r"^data:image/[a-zA-Z0-9.+-]+;base64,", re.IGNORECASE)


def only_digits(value: str | None) -> str:
    """
    Remove tudo que não for dígito.

    Examples:
        >>> only_digits('12.345.678/0001-90')
        '12345678000190'
        >>> only_digits(None)
        ''
    """
    if not value:
        return ""
    return re.sub(r"\D", "", value)


def normalize_cnpj(cnpj: str | None) -> str:
    """CNPJ em qualquer pontuação (pontos, barras, hífens, espaços) → só dígitos"""
    return only_digits(cnpj)


def validate_cep(cep: str) -> bool:
    """
    Valida CEP brasileiro (aceita 01010-000 ou 01010000).

    Examples:
        >>> validate_cep('01310-100')
        True
        >>> validate_cep('123')
        False
    """
    digits = only_digits(cep)
    if len(digits) != 8:
        return False

    # CEP não pode ser 00000000
    return digits != "00000000"


def normalize_state(state: str) -> str:
    return state.strip().upper()


def validate_state(state: str) -> bool:
    """UF de duas letras entre as 27 unidades da federação"""
    return normalize_state(state) in BRAZILIAN_STATES


def validate_photo_payload(payload: str) -> bool:
    """
    Valida uma foto de instalação em base64.

    Aceita base64 puro ou data URL (data:image/jpeg;base64,...), que é o
    formato gerado pelo checklist de instalação após a compressão.
    """
    if not payload or not payload.strip():
        return False

    encoded = _DATA_URL_PATTERN.sub("", payload.strip(), count=1)
    if not encoded:
        return False

    try:
        base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True
