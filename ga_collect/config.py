# config.py
from pathlib import Path
import configparser, logging

_cfg = configparser.ConfigParser()
ini_path = Path(__file__).with_name("config.ini")
_cfg.read(ini_path, encoding="utf-8")

def _get(section, key, default=None):
    return _cfg.get(section, key, fallback=default)

API_ENDPOINT     = _get("collect", "endpoint", "https://ssl.google-analytics.com/collect")
PROTOCOL_VERSION = _get("collect", "protocol_version", "1")

DEFAULT_CLIENT_VERSION = _get("defaults", "client_version", "1")
DEFAULT_TRACKING_ID    = _get("defaults", "tracking_id", "UA-21815217-2")
DEFAULT_CLIENT_ID      = _get("defaults", "client_id", "555")

logging.getLogger(__name__).info(
    "Config loaded – API_ENDPOINT=%s TRACKING_ID=%s", API_ENDPOINT, DEFAULT_TRACKING_ID
)
