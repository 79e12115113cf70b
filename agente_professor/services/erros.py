# agente_professor/services/erros.py
"""Exceções do domínio. Consultas nunca levantam para registro ausente: devolvem None ou []."""


class RegistroError(Exception):
    """Raiz de todos os erros do agente."""


class ValidacaoError(RegistroError, ValueError):
    """Dado de entrada inválido (nome vazio, horário malformado, dia fora de 1..7...)."""


class RegistroNaoEncontradoError(RegistroError, LookupError):
    """Um id referenciado (escola de uma turma, disciplina de uma matéria...) não existe."""


class RegistroEmUsoError(RegistroError):
    """Exclusão recusada porque outros registros ainda dependem deste."""


class BackupInvalidoError(RegistroError, ValueError):
    """Documento de backup malformado; nenhum dado foi alterado."""
