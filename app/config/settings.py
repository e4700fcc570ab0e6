from pathlib import Path
from dotenv import load_dotenv
import os
import pytz

load_dotenv(Path(__file__).parent.parent / '.env', override=True)

def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}

def env_float(name: str, default=None):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return float(value)

class Settings:
    # Directories
    BASE_DIR = Path(__file__).parent.parent
    STORAGE_DIR = Path(os.getenv('STORAGE_DIR', BASE_DIR / "storage"))

    # Logs (directory is created by setup_logger when file logging is on)
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_TO_FILE = env_bool("LOG_TO_FILE", False)
    LOGS_DIR = STORAGE_DIR / "logs"
    LOG_FILE = LOGS_DIR / "micro_compat.log"

    # Timezone used when a formatter has no zone of its own
    SERVER_TZ = pytz.timezone(os.getenv('SERVER_TZ')) if os.getenv('SERVER_TZ') else pytz.UTC

    # Datagram client
    CHARSET_NAME = os.getenv('CHARSET_NAME', 'UTF-8')
    DATAGRAM_TIMEOUT = env_float('DATAGRAM_TIMEOUT')  # seconds, None = blocking
