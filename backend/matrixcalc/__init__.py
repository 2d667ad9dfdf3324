from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
import os

# Load environment variables
load_dotenv()

def create_app(config_name='development'):
    """Application factory pattern"""
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key')
    app.config['RESULTS_DIR'] = os.environ.get('RESULTS_DIR', 'resultsOutputs')
    app.config['MAX_CONTENT_LENGTH'] = int(os.environ.get('MAX_CONTENT_LENGTH', 16 * 1024 * 1024))

    if config_name == 'testing':
        app.config['TESTING'] = True

    app.logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO'))

    # Enable CORS
    CORS(app)

    # Register blueprints
    from matrixcalc.routes.main import main_bp
    from matrixcalc.routes.api import api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix='/api/v1')

    return app
