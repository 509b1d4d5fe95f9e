from flask import Flask
from flask_cors import CORS

from config import Config
from utils.db import init_db_connection
from utils.logger import configure_logging

# Import controllers
from controllers.home_controller import home_bp
from controllers.student_controller import student_bp
from controllers.attendance_controller import attendance_bp


def create_app(config_class=Config, db=None):
    """
    Build the Flask app.
    `db` lets callers hand in an existing MongoDB database handle
    instead of connecting through MONGO_URI.
    """
    app = Flask(__name__)               # Initialize Flask app
    app.config.from_object(config_class)
    configure_logging(app)
    CORS(app)
    init_db_connection(app, db)         # Initialize MongoDB connection

    # Register Blueprint
    app.register_blueprint(home_bp)
    app.register_blueprint(student_bp)
    app.register_blueprint(attendance_bp)

    return app


# Run the app
if __name__ == "__main__":
    app = create_app()
    app.logger.info(f"Server running on http://localhost:{app.config['PORT']}")
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])
