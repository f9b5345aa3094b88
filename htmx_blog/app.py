import logging
import sys

from flask import Flask # web framework
from jinja2 import TemplateError

from .config import Config
from .errors import PersistenceError, register_error_handlers
from .models import db
from .rendering import ViewRegistry
from .store import PostStore
from .views import create_blueprint


def create_app(overrides=None):
    """Build the application: config, database, templates, routes.

    The table is created and every template compiled here, so a broken
    database or template raises before anything starts listening.
    """
    config = {
        key: getattr(Config, key) for key in dir(Config) if key.isupper()
    }
    config.update(overrides or {})

    # Flask uses the package name to locate templates and static files
    app = Flask(__name__, template_folder=config["TEMPLATE_FOLDER"])
    app.config.update(config)

    # Initialize db with app
    db.init_app(app)
    store = PostStore(db)
    with app.app_context():
        store.migrate()
    app.logger.info("✓ Database ready")

    renderer = ViewRegistry(app).load()

    app.register_blueprint(create_blueprint(store, renderer))
    register_error_handlers(app)

    app.extensions["post_store"] = store
    app.extensions["view_registry"] = renderer
    return app


def main():
    logging.basicConfig(level=logging.INFO)
    try:
        app = create_app()
    except PersistenceError as e:
        logging.getLogger(__name__).error(f"✗ {e.message}")
        sys.exit(1)  # Tell Docker/system the app failed to start
    except TemplateError as e:
        logging.getLogger(__name__).error(f"✗ Error loading templates: {e}")
        sys.exit(1)

    app.logger.setLevel(logging.INFO)
    app.run(host=app.config["HOST"], port=app.config["PORT"])


if __name__ == '__main__':
    main()
