# utils/normalizer.py
import re
from datetime import date, datetime
from typing import Optional, Union

from .validators import validate_data


def normalize_name(name: Optional[str]) -> Optional[str]:
    """
    Remove espaços nas pontas e colapsa espaços repetidos.
    Exemplo: "  Escola   Estadual A " -> "Escola Estadual A"
    """
    if not name:
        return None
    normalized = re.sub(r"\s+", " ", name.strip())
    return normalized or None


def normalize_data(valor: Union[date, str, None]) -> Optional[str]:
    """
    Converte date/datetime ou string "YYYY-MM-DD" para "YYYY-MM-DD".
    Strings fora desse formato exato (hora, sufixos, outro separador) viram None.
    """
    if isinstance(valor, datetime):
        return valor.date().isoformat()
    if isinstance(valor, date):
        return valor.isoformat()
    if isinstance(valor, str):
        valor = valor.strip()
        return valor if validate_data(valor) else None
    return None


def split_nomes(texto: Optional[str]) -> list[str]:
    """Uma linha por nome; linhas vazias são ignoradas."""
    if not texto:
        return []
    nomes = (normalize_name(linha) for linha in texto.splitlines())
    return [nome for nome in nomes if nome]
