# agente_professor/storage/record_store.py
"""
RecordStore: coleções nomeadas de registros JSON sobre um espaço chave-valor.

Cada coleção vive numa chave "<prefixo><colecao>" e guarda a lista completa de
registros serializada. Toda mutação lê a coleção inteira, altera e regrava
tudo; não há cache entre chamadas. Isso pressupõe UM único escritor (o app de
um professor só) e poucos registros: não use com escritores concorrentes.
"""

import json
import typing as t

from flask import current_app

from .backends import KeyValueStorage, build_storage
from ..services.erros import BackupInvalidoError
from ..services.uniqueness import agora_iso

Registro = dict[str, t.Any]

EXTENSION_KEY = 'record_store'
DEFAULT_PREFIX = 'teacher_agent_'


class RecordStore:

    def __init__(self, app=None, storage: t.Optional[KeyValueStorage] = None,
                 prefix: t.Optional[str] = None, colecoes: t.Sequence[str] = ()) -> None:
        # Com 'storage' explícito o store funciona fora do Flask; sem ele,
        # backend e prefixo vêm do app corrente (registrados em init_app).
        self._storage = storage
        self._prefix = prefix
        self._colecoes = tuple(colecoes)
        if app is not None:
            self.init_app(app)

    # --- CICLO DE VIDA ---

    def init_app(self, app) -> None:
        """Cria o backend configurado, abre-o e o registra em app.extensions."""
        storage = build_storage(app.config.get('STORAGE_BACKEND', 'sqlalchemy'))
        with app.app_context():
            storage.open()
        app.extensions[EXTENSION_KEY] = {
            'storage': storage,
            'prefix': app.config.get('STORAGE_PREFIX', DEFAULT_PREFIX),
        }

    def teardown(self, app) -> None:
        """Fecha o backend do app. Chamado explicitamente (testes, desligamento)."""
        state = app.extensions.pop(EXTENSION_KEY, None)
        if state is not None:
            with app.app_context():
                state['storage'].close()

    @property
    def storage(self) -> KeyValueStorage:
        if self._storage is not None:
            return self._storage
        return current_app.extensions[EXTENSION_KEY]['storage']

    @property
    def prefix(self) -> str:
        if self._prefix is not None:
            return self._prefix
        if self._storage is not None:
            return DEFAULT_PREFIX
        return current_app.extensions[EXTENSION_KEY]['prefix']

    @property
    def colecoes(self) -> tuple:
        if self._colecoes:
            return self._colecoes
        from ..models import COLECOES
        return COLECOES

    # --- LEITURA E ESCRITA DE COLEÇÕES ---

    def _key(self, colecao: str) -> str:
        return f"{self.prefix}{colecao}"

    def _save(self, colecao: str, registros: list[Registro]) -> None:
        self.storage.set_item(self._key(colecao), json.dumps(registros, ensure_ascii=False))

    def get_all(self, colecao: str) -> list[Registro]:
        data = self.storage.get_item(self._key(colecao))
        return json.loads(data) if data else []

    def get_by_id(self, colecao: str, id: str) -> t.Optional[Registro]:
        return next((r for r in self.get_all(colecao) if r.get('id') == id), None)

    def add(self, colecao: str, registro: Registro) -> None:
        registros = self.get_all(colecao)
        registros.append(registro)
        self._save(colecao, registros)

    def update(self, colecao: str, id: str, campos: t.Mapping[str, t.Any]) -> bool:
        """Mescla 'campos' no registro (merge raso). Id inexistente: não faz nada."""
        registros = self.get_all(colecao)
        for i, registro in enumerate(registros):
            if registro.get('id') == id:
                registros[i] = {**registro, **campos}
                self._save(colecao, registros)
                return True
        return False

    def delete(self, colecao: str, id: str) -> None:
        registros = self.get_all(colecao)
        restantes = [r for r in registros if r.get('id') != id]
        if len(restantes) != len(registros):
            self._save(colecao, restantes)

    def clear(self) -> int:
        """Apaga todas as chaves deste prefixo. Retorna quantas foram removidas."""
        chaves = [k for k in self.storage.keys() if k.startswith(self.prefix)]
        for chave in chaves:
            self.storage.remove_item(chave)
        return len(chaves)

    # --- BACKUP ---

    def export_snapshot(self) -> str:
        data: dict[str, t.Any] = {colecao: self.get_all(colecao) for colecao in self.colecoes}
        data['exportDate'] = agora_iso()
        return json.dumps(data, ensure_ascii=False, indent=2)

    def import_snapshot(self, blob: t.Union[str, bytes]) -> dict[str, int]:
        """
        Substitui todos os dados pelo conteúdo do backup.

        O documento é validado por inteiro antes de qualquer escrita; se for
        inválido, levanta BackupInvalidoError e nada é alterado. Coleções que
        não aparecem no backup ficam vazias. A troca é feita numa única operação
        do backend, então uma falha de gravação também deixa os dados antigos.

        Returns:
            Quantidade de registros importados por coleção.
        """
        try:
            data = json.loads(blob)
        except (TypeError, ValueError) as e:
            raise BackupInvalidoError('Formato de backup inválido') from e

        if not isinstance(data, dict):
            raise BackupInvalidoError('Formato de backup inválido')
        for colecao in self.colecoes:
            registros = data.get(colecao)
            if registros is None:
                continue
            if not isinstance(registros, list) or not all(isinstance(r, dict) for r in registros):
                raise BackupInvalidoError(f"Formato de backup inválido: '{colecao}' não é uma lista de registros")

        itens = {}
        importados = {}
        for colecao in self.colecoes:
            registros = data.get(colecao)
            if registros:
                itens[self._key(colecao)] = json.dumps(registros, ensure_ascii=False)
            importados[colecao] = len(registros or [])
        # Limpa o prefixo e grava tudo de uma vez no backend
        self.storage.replace_prefix(self.prefix, itens)
        return importados
