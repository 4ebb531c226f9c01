from .user import User
from .problem import Problem, CATEGORIES, DIFFICULTIES

__all__ = ["User", "Problem", "CATEGORIES", "DIFFICULTIES"]
