# agente_professor/config.py

import os
basedir = os.path.abspath(os.path.dirname(__file__))

# Este bloco carrega o arquivo .env, tornando as variáveis disponíveis para 'os.environ.get'
from dotenv import load_dotenv
dotenv_path = os.path.join(os.path.dirname(basedir), '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)

STORAGE_BACKENDS = ('sqlalchemy', 'memory')


class Config:
    # --- CHAVE SECRETA ---
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'troque-esta-chave-em-producao'

    # --- BANCO DE DADOS ---
    # Sem DATABASE_URL o app usa um arquivo SQLite local (uso offline, um único professor)
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL") or \
        'sqlite:///' + os.path.join(os.path.dirname(basedir), 'agente_professor.db')

    SQLALCHEMY_ECHO = False

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- ARMAZENAMENTO CHAVE-VALOR ---
    # 'sqlalchemy' grava cada coleção numa linha da tabela storage_entries;
    # 'memory' mantém tudo num dicionário (testes).
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'sqlalchemy')
    STORAGE_PREFIX = os.environ.get('STORAGE_PREFIX', 'teacher_agent_')

    # --- BACKUP ---
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024  # fotos em base64 deixam o backup grande

    # --- INICIALIZAÇÃO DO APP ---
    @staticmethod
    def init_app(app):
        if not app.config.get("SQLALCHEMY_DATABASE_URI"):
            raise ValueError(
                "A variável de ambiente 'DATABASE_URL' não foi carregada. "
                "Verifique o arquivo .env."
            )
        if app.config.get("STORAGE_BACKEND") not in STORAGE_BACKENDS:
            raise ValueError(
                f"STORAGE_BACKEND inválido: {app.config.get('STORAGE_BACKEND')!r}. "
                f"Use um destes: {', '.join(STORAGE_BACKENDS)}."
            )
