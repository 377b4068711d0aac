from flask import Flask
from config import Config
from extensions import CatalogStore


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # init extensions
    CatalogStore(app)

    # import and register blueprints
    from routes import catalog_bp
    from advisor import advise

    app.register_blueprint(catalog_bp)
    app.cli.add_command(advise)

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
