import logging

from primecloud.config import from_env
from primecloud.settings import load_api_settings

logger = logging.getLogger(__name__)

_API_SETTINGS = load_api_settings()

API_SERVER_HOST = _API_SETTINGS.api_server_host
API_SERVER_PORT = _API_SETTINGS.api_server_port
FRONTEND_PORT = _API_SETTINGS.frontend_port
INSTANCE_ID = from_env()["INSTANCE_ID"]
