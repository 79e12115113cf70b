import re
from datetime import date

DATA_REGEX = re.compile(r"^\d{4}-\d{2}-\d{2}$")
HORA_REGEX = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
DATA_URI_REGEX = re.compile(r"^data:[\w.+-]+/[\w.+-]+;base64,")


def validate_hora(hora) -> bool:
    """Valida um horário no formato HH:MM (24h)."""
    return isinstance(hora, str) and HORA_REGEX.match(hora) is not None


def validate_data(data) -> bool:
    """Valida uma data no formato YYYY-MM-DD."""
    if not isinstance(data, str) or DATA_REGEX.match(data) is None:
        return False
    try:
        date.fromisoformat(data)
    except ValueError:
        return False
    return True


def validate_dia_semana(dia) -> bool:
    """1 = segunda ... 7 = domingo."""
    return isinstance(dia, int) and not isinstance(dia, bool) and 1 <= dia <= 7


def validate_intervalo(hora_inicio, hora_fim) -> tuple[bool, str]:
    """
    Verifica um intervalo de aula.
    Requer: início e fim em HH:MM, início estritamente antes do fim.
    """
    if not validate_hora(hora_inicio):
        return False, "Horário de início inválido. Use o formato HH:MM."
    if not validate_hora(hora_fim):
        return False, "Horário de término inválido. Use o formato HH:MM."
    # HH:MM com zero à esquerda ordena lexicograficamente
    if hora_inicio >= hora_fim:
        return False, "O horário de início deve ser anterior ao de término."
    return True, "Intervalo válido."


def validate_data_uri(valor) -> bool:
    """Fotos e arquivos são guardados inline como data URI em base64."""
    return isinstance(valor, str) and DATA_URI_REGEX.match(valor) is not None
