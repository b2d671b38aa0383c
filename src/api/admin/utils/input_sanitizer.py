# src/api/admin/utils/input_sanitizer.py

LIKE_ESCAPE_CHAR = "\\"


def sanitize_search_input(search: str | None, max_length: int = 100) -> str:
    """
    Normaliza um critério de busca digitado pelo usuário

    Args:
        search: String de busca do usuário
        max_length: Tamanho máximo permitido

    Returns:
        String sem espaços nas pontas, truncada; vazia se não houver critério
    """
    if not search:
        return ""
    return search.strip()[:max_length]


def contains_pattern(search: str) -> str:
    """
    Padrão LIKE de substring com os curingas do usuário escapados.

    Usar junto com ``escape=LIKE_ESCAPE_CHAR``:
        >>> contains_pattern('10%_a')
        '%10\\\\%\\\\_a%'
    """
    escaped = (
        search.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", LIKE_ESCAPE_CHAR + "%")
        .replace("_", LIKE_ESCAPE_CHAR + "_")
    )
    return f"%{escaped}%"
