from flask import Blueprint, current_app, jsonify

from matrixcalc.services.matrix_service import MENU_CHOICES, OPERATIONS, MatrixService

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    """Root endpoint"""
    return jsonify({
        'message': 'Sparse Matrix Calculator API',
        'version': '1.0.0',
        'status': 'running'
    })

@main_bp.route('/health')
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'message': 'API is running successfully'
    })

@main_bp.route('/api-info')
def api_info():
    """API information endpoint"""
    results_dir = current_app.config['RESULTS_DIR']
    return jsonify({
        'name': 'Sparse Matrix Calculator API',
        'version': '1.0.0',
        'operations': list(OPERATIONS),
        'menu_choices': MENU_CHOICES,
        'results_dir': results_dir,
        'stored_results': len(MatrixService(results_dir).list_results()),
        'endpoints': {
            'main': '/',
            'health': '/health',
            'api_info': '/api-info',
            'compute': '/api/v1/matrices/compute',
            'upload': '/api/v1/matrices/upload',
            'results': '/api/v1/results'
        }
    })
