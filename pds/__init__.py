"""
PDS Validation Service

Validation and deterministic auto-correction for the Civil Service
Personal Data Sheet (CS Form 212).

Provides:
- Whole-document and single-field validation
- Automatic repair of fixable findings
- JSON API for validate, autofix and batch validation
"""

import os
import time

from flask import Flask, request, g, jsonify


def create_app(test_config=None):
    """Application factory pattern."""
    app = Flask(__name__, instance_relative_config=True)

    # Default configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production'),
        LOG_LEVEL=os.environ.get('LOG_LEVEL', 'INFO'),

        # Maximum documents accepted by the batch validation endpoint
        PDS_BATCH_LIMIT=int(os.environ.get('PDS_BATCH_LIMIT', 50)),

        # Reject request bodies over 5 MB
        MAX_CONTENT_LENGTH=int(os.environ.get('MAX_CONTENT_LENGTH', 5 * 1024 * 1024)),
    )

    if test_config is None:
        # Load instance config if it exists
        app.config.from_pyfile('config.py', silent=True)
    else:
        # Load test config
        app.config.from_mapping(test_config)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Register blueprints
    from pds.routes import api_bp
    app.register_blueprint(api_bp)

    # Request logging
    @app.before_request
    def before_request():
        """Log request start."""
        g.request_start_time = time.perf_counter()

    @app.after_request
    def log_request(response):
        """Log request completion."""
        if hasattr(g, 'request_start_time'):
            duration = time.perf_counter() - g.request_start_time
            app.logger.info(
                f'{request.method} {request.path} - {response.status_code} - {duration:.3f}s'
            )
        return response

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'ok': False,
            'errors': [{'field': '', 'message': 'Resource not found', 'code': 'not_found'}]
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'ok': False,
            'errors': [{'field': '', 'message': 'Method not allowed', 'code': 'method_not_allowed'}]
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle internal errors."""
        app.logger.error(f'Internal error: {str(error)}')
        return jsonify({
            'ok': False,
            'errors': [{'field': '', 'message': 'Internal server error', 'code': 'internal_error'}]
        }), 500

    return app
