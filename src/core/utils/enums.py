import enum


class TicketStatus(str, enum.Enum):
    """
    Ciclo de vida de um chamado: open → resolved (terminal).
    """
    OPEN = "open"
    RESOLVED = "resolved"


class PrincipalRole(str, enum.Enum):
    """Quem está por trás de um token de sessão"""
    ADMIN = "admin"
    SUPPLIER = "supplier"
    STORE = "store"
