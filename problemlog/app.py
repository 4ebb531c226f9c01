# ========================
# app.py
# ========================

from flask import Flask

from .config import Config
from .errors import register_error_handlers
from .extensions import db, login_manager
from .importer import ProblemImporter
from .logging_setup import configure_logging
from .routes import auth, problems, extract
from .routes.extract import IMPORTER_KEY
from .store import ProblemStore, get_store


def create_app(config_object=Config, importer=None):
    # =========================
    # Flask 初期化
    # =========================
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app.config["LOG_LEVEL"])

    db.init_app(app)
    login_manager.init_app(app)

    # 保存先ハンドル（アプリごとに明示的に作る）
    ProblemStore(db, app)
    app.extensions[IMPORTER_KEY] = importer or ProblemImporter.from_config(app.config)

    # =========================
    # Login Manager
    # =========================
    @login_manager.user_loader
    def load_user(user_id):
        return get_store().get_user(user_id)

    # =========================
    # Blueprint / エラーハンドラ登録
    # =========================
    app.register_blueprint(auth)
    app.register_blueprint(problems)
    app.register_blueprint(extract)
    register_error_handlers(app)

    # =========================
    # DB 初期化
    # =========================
    with app.app_context():
        db.create_all()

    app.logger.info("problemlog started")
    return app


if __name__ == "__main__":
    app = create_app()
    try:
        app.run(host="0.0.0.0", port=5000, debug=True)
    finally:
        with app.app_context():
            get_store().dispose()
