"""
Core layer: 설정 로드, ID 발급.

backend (src/app)와 frontend (src/web) 양쪽에서 공유.
"""

from .config import backend_url, get_section, load_config
from .ids import generate_entry_id, generate_request_id

__all__ = [
    # config
    "load_config",
    "get_section",
    "backend_url",
    # ids
    "generate_entry_id",
    "generate_request_id",
]
