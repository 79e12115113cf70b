# agente_professor/app.py

import os
import click
from flask import Flask, jsonify
from flask_migrate import Migrate

from agente_professor.config import Config
from agente_professor.extensions import record_store
from agente_professor.models.database import db

# --- Importação dos modelos para o Flask-Migrate ---
# A tabela storage_entries precisa estar registrada no metadata antes do create_all/migrate.
from agente_professor.models.storage_entry import StorageEntry  # noqa: F401
# ------------------------------------------------------------


def create_app(config_class=Config):
    """
    Fábrica de aplicação: cria e configura a instância do Flask.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    config_class.init_app(app)

    db.init_app(app)
    Migrate(app, db)
    record_store.init_app(app)

    with app.app_context():
        register_blueprints(app)
        register_handlers(app)

    register_cli_commands(app)
    return app


def register_blueprints(app):
    """Importa e registra os blueprints na aplicação."""
    # Importações locais para evitar dependência circular
    from agente_professor.controllers.backup_controller import backup_bp

    app.register_blueprint(backup_bp)


def register_handlers(app):
    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'success': False, 'message': 'Recurso não encontrado.'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()  # Garante rollback em caso de erro no banco
        return jsonify({'success': False, 'message': 'Erro interno.'}), 500


def register_cli_commands(app):
    from agente_professor.services.backup_service import BackupService

    @app.cli.command("export-backup")
    @click.option('--output', '-o', type=click.Path(dir_okay=False, writable=True),
                  help='Arquivo de destino. Sem ele, o backup vai para a saída padrão.')
    def export_backup_command(output):
        """Exporta todas as coleções para um único arquivo JSON."""
        conteudo = BackupService.export_backup()
        if not output:
            click.echo(conteudo)
            return
        with open(output, 'w', encoding='utf-8') as f:
            f.write(conteudo)
        click.echo(f"Backup salvo em {os.path.abspath(output)}")

    @app.cli.command("import-backup")
    @click.argument('path', type=click.Path(exists=True, dir_okay=False))
    @click.option('--yes', 'confirmado', is_flag=True, help='Não pede confirmação.')
    def import_backup_command(path, confirmado):
        """Restaura um backup, substituindo todos os dados atuais."""
        if not confirmado and not click.confirm(
            "ATENÇÃO: Todos os dados atuais serão substituídos pelo backup. Deseja continuar?"
        ):
            click.echo("Operação cancelada.")
            return
        with open(path, 'r', encoding='utf-8') as f:
            blob = f.read()
        success, message = BackupService.import_backup(blob)
        if not success:
            raise click.ClickException(message)
        click.echo(message)

    @app.cli.command("clear-data")
    @click.option('--yes', 'confirmado', is_flag=True, help='Não pede confirmação.')
    def clear_data_command(confirmado):
        """Apaga escolas, turmas, alunos, horários, chamadas e a biblioteca."""
        if not confirmado and not click.confirm(
            "ATENÇÃO: Este comando irá apagar TODOS os dados. Deseja continuar?"
        ):
            click.echo("Operação cancelada.")
            return
        removidas = BackupService.clear_data()
        click.echo(f"Sucesso! {removidas} coleção(ões) apagada(s).")


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True)
