# agente_professor/controllers/backup_controller.py

import io

from flask import Blueprint, request, jsonify, send_file

from ..services.backup_service import BackupService

backup_bp = Blueprint('backup', __name__, url_prefix='/backup')


@backup_bp.route('/exportar')
def exportar():
    """Baixa o backup completo como arquivo .json."""
    conteudo = BackupService.export_backup()
    return send_file(
        io.BytesIO(conteudo.encode('utf-8')),
        as_attachment=True,
        download_name=BackupService.backup_filename(),
        mimetype='application/json'
    )


@backup_bp.route('/importar', methods=['POST'])
def importar():
    """Aceita o backup como arquivo enviado ('arquivo') ou como corpo JSON cru."""
    arquivo = request.files.get('arquivo')
    if arquivo:
        blob = arquivo.read()
    else:
        blob = request.get_data()

    if not blob:
        return jsonify({'success': False, 'message': 'Nenhum arquivo de backup enviado.'}), 400

    success, message = BackupService.import_backup(blob)
    return jsonify({'success': success, 'message': message}), (200 if success else 400)
