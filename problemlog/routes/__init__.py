from .auth import auth
from .problems import problems
from .extract import extract

__all__ = ["auth", "problems", "extract"]
