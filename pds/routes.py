"""
Flask routes for the PDS validation service.

Endpoints:
- POST /api/pds/validate         whole-document validation
- POST /api/pds/validate-field   single-field (on-blur) validation
- POST /api/pds/autofix          automatic correction plus re-validation
- POST /api/pds/validate/batch   validation of up to PDS_BATCH_LIMIT documents
- GET  /api/health               liveness check
"""

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from pds.autofix import auto_fix_pds
from pds.models import ValidationResult
from pds.validation import validate_field, validate_pds


api_bp = Blueprint('api', __name__, url_prefix='/api')


def error_response(message: str, code: str, status: int, field: str = ''):
    """Build the standard JSON error envelope."""
    return jsonify({
        'ok': False,
        'errors': [{'field': field, 'message': message, 'code': code}]
    }), status


def _json_object():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else None


@api_bp.route('/health', methods=['GET'])
def api_health():
    return jsonify({'ok': True}), 200


@api_bp.route('/pds/validate', methods=['POST'])
def api_validate():
    """
    Validate a complete PDS document.

    Returns:
        200 with the validation result when valid, 422 when errors were found
    """
    try:
        document = _json_object()
        if document is None:
            return error_response('No JSON payload provided', 'missing_payload', 400)

        result = validate_pds(document)
        current_app.logger.info(
            f'PDS validated: {len(result.errors)} errors, {len(result.warnings)} warnings'
        )
        if result.is_valid:
            return jsonify(result.to_dict()), 200

        response = result.to_dict()
        response['errorsBySection'] = {
            section: [e.to_dict() for e in errors]
            for section, errors in result.get_errors_by_section().items()
        }
        return jsonify(response), 422

    except Exception as e:
        current_app.logger.error(f'Validation error: {str(e)}')
        return error_response('Internal validation error', 'internal_error', 500)


@api_bp.route('/pds/validate-field', methods=['POST'])
def api_validate_field():
    """Validate one field value; body is {"field": path, "value": value}."""
    try:
        payload = _json_object()
        if payload is None:
            return error_response('No JSON payload provided', 'missing_payload', 400)

        field_path = payload.get('field')
        if not isinstance(field_path, str) or not field_path:
            return error_response('Field path is required', 'missing_field', 400, field='field')

        result = validate_field(field_path, payload.get('value'))
        return jsonify(result.to_dict()), 200

    except Exception as e:
        current_app.logger.error(f'Field validation error: {str(e)}')
        return error_response('Internal validation error', 'internal_error', 500)


@api_bp.route('/pds/autofix', methods=['POST'])
def api_autofix():
    """
    Apply automatic fixes to a document.

    Body is {"data": document, "validation": optional validation result}.
    Without a validation result the document is validated first. The
    response includes a re-validation of the corrected document.
    """
    try:
        payload = _json_object()
        if payload is None:
            return error_response('No JSON payload provided', 'missing_payload', 400)

        document = payload.get('data')
        if not isinstance(document, dict):
            return error_response('Document data is required', 'missing_data', 400, field='data')

        validation = payload.get('validation')
        if isinstance(validation, dict):
            validation_result = ValidationResult.from_dict(validation)
        else:
            validation_result = validate_pds(document)

        result = auto_fix_pds(document, validation_result)
        revalidation = validate_pds(result.corrected_data)

        current_app.logger.info(
            f'PDS autofix: {len(result.fixes_applied)} fixed, '
            f'{len(result.unfixable_errors)} unfixable'
        )

        response = result.to_dict()
        response['validation'] = revalidation.to_dict()
        return jsonify(response), 200

    except Exception as e:
        current_app.logger.error(f'Autofix error: {str(e)}')
        return error_response('Internal autofix error', 'internal_error', 500)


@api_bp.route('/pds/validate/batch', methods=['POST'])
def api_validate_batch():
    """
    Validate several documents in one request.

    Body is {"documents": [{"id": ..., "data": {...}}, ...]}.
    """
    payload = _json_object()
    if payload is None:
        return error_response('No JSON payload provided', 'missing_payload', 400)

    documents = payload.get('documents')
    if not isinstance(documents, list) or len(documents) == 0:
        return error_response('documents must be a non-empty array', 'invalid_batch', 400,
                              field='documents')

    limit = current_app.config['PDS_BATCH_LIMIT']
    if len(documents) > limit:
        return error_response(f'Batch size limit exceeded. Maximum {limit} PDS records per batch.',
                              'batch_limit_exceeded', 400, field='documents')

    results = []
    valid_count = 0
    invalid_count = 0

    for i, item in enumerate(documents):
        item = item if isinstance(item, dict) else {}
        pds_id = item.get('id', i)
        processed_at = datetime.now(timezone.utc).isoformat()

        try:
            document = item.get('data')
            if not isinstance(document, dict):
                results.append({
                    'pdsId': pds_id,
                    'isValid': False,
                    'errors': [{'field': '', 'message': 'Document data is required',
                                'code': 'missing_data', 'severity': 'error'}],
                    'processedAt': processed_at,
                })
                invalid_count += 1
                continue

            result = validate_pds(document)
            results.append({
                'pdsId': pds_id,
                'isValid': result.is_valid,
                'errors': [e.to_dict() for e in result.errors],
                'processedAt': processed_at,
            })
            if result.is_valid:
                valid_count += 1
            else:
                invalid_count += 1

        except Exception as e:
            current_app.logger.error(f'Batch validation error for PDS {pds_id}: {str(e)}')
            results.append({
                'pdsId': pds_id,
                'isValid': False,
                'errors': [{'field': '', 'message': 'Validation failed due to system error',
                            'code': 'internal_error', 'severity': 'error'}],
                'processedAt': processed_at,
            })
            invalid_count += 1

    current_app.logger.info(f'Batch PDS validation completed: {len(documents)} records processed')

    return jsonify({
        'totalProcessed': len(documents),
        'validCount': valid_count,
        'invalidCount': invalid_count,
        'results': results,
    }), 200
