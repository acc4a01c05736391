import binascii
import logging

from flask import Blueprint, request, jsonify, current_app

from .. import catalog
from ..exceptions import ConfigurationError, ValidationError
from ..inference import infer_sync
from ..versioning import get_version_number

api_bp = Blueprint('api', __name__, url_prefix='/api')

logger = logging.getLogger('solcver.api')


def _decode_bytecode(raw) -> bytes:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("Missing 'bytecode' (hex string)")
    text = raw.strip()
    if text[:2].lower() == '0x':
        text = text[2:]
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise ValidationError(f'Invalid hex bytecode: {e}', details={'length': len(text)})


@api_bp.route('/compilers/latest', methods=['GET'])
def latest_compiler():
    compilers = catalog.get_versions()
    latest = catalog.latest_release(compilers)
    return jsonify({
        'version': latest.format(),
        'build': catalog.resolve_full_identifier(latest.format(), compilers),
    })


@api_bp.route('/compilers/<short_version>', methods=['GET'])
def compiler_build(short_version: str):
    version = get_version_number(short_version)
    return jsonify({
        'version': version.format(),
        'build': catalog.resolve_full_identifier(version.format()),
    })


@api_bp.route('/infer', methods=['POST'])
def infer_version():
    decoder = current_app.config.get('METADATA_DECODER')
    if decoder is None:
        raise ConfigurationError('METADATA_DECODER', 'no metadata decoder configured')
    payload = request.get_json(silent=True)
    if payload is None or not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')
    bytecode = _decode_bytecode(payload.get('bytecode'))
    version_range = infer_sync(bytecode, decoder)
    out = {
        'inferral_kind': version_range.inferral_kind.value,
        'range': str(version_range),
    }
    if request.args.get('candidates', '0') == '1':
        out['candidates'] = [v.format() for v in catalog.matching_releases(version_range)]
    logger.info('inferred kind=%s range=%s bytes=%d', out['inferral_kind'], out['range'], len(bytecode))
    return jsonify(out)
