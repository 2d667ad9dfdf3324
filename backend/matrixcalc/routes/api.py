from flask import Blueprint, request, jsonify, Response, current_app
from marshmallow import ValidationError
from werkzeug.utils import secure_filename

from matrixcalc.schemas import ComputeRequestSchema, UploadFormSchema
from matrixcalc.services.matrix_service import MatrixService
from matrixcalc.utils.errors import DimensionError, FormatError
from matrixcalc.utils.helpers import generate_response, matrix_to_dict

api_bp = Blueprint('api', __name__)
compute_schema = ComputeRequestSchema()
upload_schema = UploadFormSchema()


def get_matrix_service():
    return MatrixService(current_app.config['RESULTS_DIR'])


# Error handlers

@api_bp.errorhandler(ValidationError)
def handle_validation_error(e):
    current_app.logger.warning('Rejected request: %s', e.messages)
    return jsonify(generate_response(success=False, error=e.messages)), 400

@api_bp.errorhandler(FormatError)
def handle_format_error(e):
    current_app.logger.warning('Malformed matrix: %s', e.message)
    response = generate_response(success=False)
    response.update(e.to_dict())
    return jsonify(response), 400

@api_bp.errorhandler(DimensionError)
def handle_dimension_error(e):
    current_app.logger.warning('Incompatible dimensions for %s', e.operation)
    response = generate_response(success=False)
    response.update(e.to_dict())
    return jsonify(response), 422


# Matrix operations

@api_bp.route('/matrices/compute', methods=['POST'])
def compute_matrices():
    """Add, subtract or multiply two matrices sent as text"""
    data = request.get_json(silent=True)
    if not data:
        return jsonify(generate_response(success=False, error='No data provided')), 400

    payload = compute_schema.load(data)
    result = get_matrix_service().compute(payload['operation'], payload['first'], payload['second'])
    current_app.logger.info('Computed %s: %r', payload['operation'], result)

    return jsonify(generate_response(data=matrix_to_dict(result))), 200

@api_bp.route('/matrices/upload', methods=['POST'])
def upload_matrices():
    """Operate two uploaded matrix files and store the result"""
    first_file = request.files.get('first')
    second_file = request.files.get('second')
    if first_file is None or second_file is None:
        return jsonify(generate_response(success=False, error='Two files are required: first, second')), 400
    if first_file.filename == '' or second_file.filename == '':
        return jsonify(generate_response(success=False, error='No file selected')), 400

    payload = upload_schema.load(request.form.to_dict())

    try:
        first_text = first_file.read().decode('utf-8')
        second_text = second_file.read().decode('utf-8')
    except UnicodeDecodeError:
        return jsonify(generate_response(success=False, error='Matrix files must be UTF-8 text')), 400

    first_name = secure_filename(first_file.filename) or 'first'
    second_name = secure_filename(second_file.filename) or 'second'

    result, output_path = get_matrix_service().compute_and_save(
        payload['operation'], first_name, first_text, second_name, second_text
    )
    current_app.logger.info('Result saved to %s', output_path)

    data = matrix_to_dict(result)
    data['filename'] = output_path.replace('\\', '/').rsplit('/', 1)[-1]
    return jsonify(generate_response(data=data, message=f'Result saved to {output_path}')), 201

@api_bp.route('/results', methods=['GET'])
def list_results():
    """List stored result files"""
    results = get_matrix_service().list_results()
    return jsonify({
        'success': True,
        'data': results,
        'count': len(results)
    }), 200

@api_bp.route('/results/<filename>', methods=['GET'])
def get_result(filename):
    """Download a stored result as plain text"""
    path = get_matrix_service().get_result_path(secure_filename(filename))
    if path is None:
        return jsonify(generate_response(success=False, error='Result not found')), 404

    with open(path, 'r', encoding='utf-8') as f:
        content = f.read()
    return Response(content, mimetype='text/plain')
