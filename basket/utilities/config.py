"""Configuration management for the Basket shopping-list application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Share codec
# 'auto' uses raw DEFLATE when the interpreter has zlib, 'off' always emits the plain compact array
SHARE_COMPRESSION: Final[str] = os.getenv('SHARE_COMPRESSION', 'auto').lower()
SHARE_COMPRESSION_LEVEL: Final[int] = min(9, max(0, int(os.getenv('SHARE_COMPRESSION_LEVEL', '9'))))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('BASKET_DATA_DIR', str(BASE_DIR / 'data')))

# Limits on untrusted share input
MAX_TRANSPORT_LENGTH: Final[int] = int(os.getenv('MAX_TRANSPORT_LENGTH', '65536'))
MAX_DECOMPRESSED_BYTES: Final[int] = int(os.getenv('MAX_DECOMPRESSED_BYTES', str(1024 * 1024)))
