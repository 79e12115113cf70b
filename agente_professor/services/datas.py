# agente_professor/services/datas.py

from datetime import date

from .erros import ValidacaoError
from utils.normalizer import normalize_data


def parse_data(valor) -> date:
    """Aceita date/datetime ou "YYYY-MM-DD"; qualquer outra coisa é ValidacaoError."""
    iso = normalize_data(valor)
    if iso is None:
        raise ValidacaoError(f"Data inválida: {valor!r}. Use o formato YYYY-MM-DD.")
    return date.fromisoformat(iso)


def data_iso(valor) -> str:
    return parse_data(valor).isoformat()


def dia_da_semana(valor) -> int:
    """Dia da semana ISO: 1 = segunda ... 7 = domingo (o domingo nunca é 0)."""
    return parse_data(valor).isoweekday()
