from basket.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = _CONFIGURED_DATA_DIR.resolve()
LISTS_FILE = DATA_DIR / 'basket.json'

__all__ = ['DATA_DIR', 'LISTS_FILE']
