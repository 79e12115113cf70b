# utils/__init__.py
"""Validação e normalização dos dados digitados pelo professor."""

from .normalizer import normalize_name, normalize_data, split_nomes
from .validators import (
    validate_hora,
    validate_data,
    validate_dia_semana,
    validate_intervalo,
    validate_data_uri,
)
