import os
import logging
from flask import Flask, jsonify

from .exceptions import SolcVerException, error_response


def create_app(decoder=None):
    """Build the solcver Flask app.

    ``decoder`` is the metadata decoder used by ``POST /api/infer``; it may also
    be provided later through ``app.config['METADATA_DECODER']``.
    """
    app = Flask(__name__)
    app.config['METADATA_DECODER'] = decoder

    # Logging configuration
    level_name = os.environ.get('SOLCVER_LOG_LEVEL', 'INFO').upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )
    # Optional rotating file handler for persistent logs
    log_file = os.environ.get('SOLCVER_LOG_FILE')
    if log_file:
        try:
            from logging.handlers import RotatingFileHandler
            max_bytes = int(os.environ.get('SOLCVER_LOG_MAX_BYTES', str(5 * 1024 * 1024)))
            backup = int(os.environ.get('SOLCVER_LOG_BACKUP_COUNT', '5'))
            fh = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup)
            fh.setLevel(level)
            fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s'))
            logging.getLogger().addHandler(fh)
            logging.getLogger(__name__).info(
                'RotatingFileHandler attached path=%s max_bytes=%d backups=%d',
                log_file, max_bytes, backup)
        except (OSError, ValueError):
            logging.getLogger(__name__).warning('failed attaching RotatingFileHandler for %s', log_file)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger(__name__).info('Logging initialized at level %s', level_name)

    @app.errorhandler(SolcVerException)
    def _handle_solcver_error(exc):
        if exc.status_code >= 500:
            logging.getLogger(__name__).error('%s: %s', exc.error_code, exc.message)
        body, status = error_response(exc)
        return jsonify(body), status

    # register blueprints
    from .routes.system import system_bp
    from .routes.api import api_bp
    app.register_blueprint(system_bp)
    app.register_blueprint(api_bp)
    return app
