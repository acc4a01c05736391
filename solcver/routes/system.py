import os, time
from flask import Blueprint, jsonify

system_bp = Blueprint('system', __name__)

_START_TIME = time.time()
_VERSION = os.environ.get('SOLCVER_VERSION', '0.1.0')

@system_bp.route('/health', methods=['GET'])
def health():
    uptime = time.time() - _START_TIME
    return jsonify({'status': 'ok', 'uptime_seconds': round(uptime,2)})

@system_bp.route('/version', methods=['GET'])
def version():
    uptime = time.time() - _START_TIME
    return jsonify({
        'version': _VERSION,
        'uptime_seconds': round(uptime,2),
    })
