import logging
from logging.handlers import RotatingFileHandler
import os
from datetime import datetime

def setup_logging(log_dir=None, level=logging.INFO):
    """
    Configure logging with timestamped log files.

    Does nothing when the root logger already has handlers, so no log file is
    opened that would never be attached.
    """
    logger = logging.getLogger()
    if logger.handlers:
        logger.debug("Logging already configured; keeping existing handlers")
        return logger

    try:
        if log_dir is None:
            log_dir = os.path.join(os.path.dirname(__file__), 'logs')
        os.makedirs(log_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f'rasterkit_{timestamp}.log')
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5*1024*1024,  # 5 MB
            backupCount=3,
            encoding='utf-8'
        )
    except OSError as e:
        print(f"CRITICAL: Failed to open log file, logging to console only: {str(e)}")
        logging.basicConfig(level=level)
        return logger

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[file_handler, logging.StreamHandler()]
    )
    logger.info(f"Logging initialized. Log file: {log_file}")
    return logger
