import logging
import os
import sys
from datetime import datetime
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    configure the root logger once

    always logs to stdout; when log_dir is given a dated file handler is
    added as well (person_api_YYYYMMDD.log)
    """
    root = logging.getLogger()
    if root.handlers:
        # already configured (uvicorn, pytest, repeated create_app calls)
        return

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f'person_api_{datetime.now().strftime("%Y%m%d")}.log')
        handlers.append(logging.FileHandler(log_file, mode='a'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
