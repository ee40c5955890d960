import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration."""

    API_TITLE = "Email Service API"
    API_VERSION = "1.0.0"
    OPENAPI_VERSION = "3.0.3"
    OPENAPI_URL_PREFIX = "/api"
    OPENAPI_JSON_PATH = "openapi.json"
    OPENAPI_SWAGGER_UI_PATH = "docs"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
