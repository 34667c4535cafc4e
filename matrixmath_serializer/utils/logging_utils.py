"""
Logging setup shared by the demo scripts and any tooling built on the serializers.
"""

import sys
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Configure logging with console output at the given level and,
    when log_dir is set, a DEBUG file log alongside it.
    Returns the log file path, or None when logging only to the console.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return None

    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_filename = logs_dir / f"matrixmath_serializer_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    file_handler = logging.FileHandler(log_filename, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    logging.info(f"Log file: {log_filename}")
    return log_filename
