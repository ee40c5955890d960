from flask_smorest import Blueprint

bp = Blueprint("api", __name__, description="Email Service API")

from . import email  # noqa: E402,F401
