import os
import dotenv


dotenv.load_dotenv()


# Defaults
VERBOSE = False
LOG_PATH = "deluge_client.log"
LOG_LEVEL = "INFO"
LOG_ROTATION = "1 week"
LOG_RETENTION = "1 month"

DELUGE_URL = "http://localhost:8112"
DELUGE_PASSWORD = "deluge"
# Empty means block until the daemon answers
DELUGE_TIMEOUT = ""


def _optional_float(value):
    if value is None or str(value).strip() == "":
        return None
    return float(value)


class Config:
    VERBOSE = os.getenv("VERBOSE", str(VERBOSE)).lower() == "true"

    LOG_PATH = os.getenv("LOG_PATH", LOG_PATH)
    LOG_LEVEL = os.getenv("LOG_LEVEL", LOG_LEVEL)
    LOG_ROTATION = os.getenv("LOG_ROTATION", LOG_ROTATION)
    LOG_RETENTION = os.getenv("LOG_RETENTION", LOG_RETENTION)

    # Deluge Web UI
    DELUGE_URL = os.getenv("DELUGE_URL", DELUGE_URL).rstrip('/')
    DELUGE_PASSWORD = os.getenv("DELUGE_PASSWORD", DELUGE_PASSWORD)
    DELUGE_TIMEOUT = _optional_float(os.getenv("DELUGE_TIMEOUT", DELUGE_TIMEOUT))
