# ========================
# extensions.py
# ========================

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

from .errors import AuthenticationError

# ========================
# Flask拡張機能の初期化
# ========================
db = SQLAlchemy()
login_manager = LoginManager()


# API なのでログイン画面へはリダイレクトしない
@login_manager.unauthorized_handler
def unauthorized():
    raise AuthenticationError("Unauthorized")
