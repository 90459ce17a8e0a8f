from flask import Flask
from werkzeug.exceptions import HTTPException
from Admin.config import Config
from Admin.Routes.Models.User import db
from Admin.Routes.Places.place import places_bp
from Admin.Routes.Playlists.playlist import playlists_bp
from Admin.Routes.Users.user import users_bp
from Admin.Routes.Dashboard.dashboard import dashboard_bp
from Admin.Routes.Moderation.moderation import moderation_bp
from Admin.Storage.storage import DatabaseStorage
from Admin.Storage.seed import seed_database
from Admin.Utils.Logger import configure_logging, get_logger
from Admin.Utils.Response import json_response

logger = get_logger(__name__)


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return json_response(e.code, e.description or e.name, error={'http': e.name})

    @app.errorhandler(Exception)
    def handle_unexpected_exception(e):
        db.session.rollback()
        logger.exception(f"Unhandled error: {e}")
        return json_response(500, 'Internal server error', error=str(e))


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if isinstance(config_object, dict):
        app.config.update(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    configure_logging(app.config['LOG_LEVEL'])

    db.init_app(app)
    app.extensions['storage'] = DatabaseStorage(db)

    app.register_blueprint(places_bp)
    app.register_blueprint(playlists_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(moderation_bp)
    register_error_handlers(app)

    with app.app_context():
        db.create_all()
        if app.config['SEED_DEMO_DATA']:
            seed_database(app.extensions['storage'])

    logger.info("App ready")
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host=app.config['HOST'], port=app.config['PORT'])
