from pathlib import Path
from dotenv import load_dotenv
import logging
import os

# Load environment variables
CURRENT_DIR = Path(os.path.dirname(os.path.abspath(__file__)))
load_dotenv((CURRENT_DIR / '.env').as_posix())

LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')
QUERY_WORKERS = int(os.getenv('QUERY_WORKERS', '3'))


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Set up console logging for the application.

    Args:
        level: Level name such as 'INFO' or 'DEBUG'

    Returns:
        The configured root logger
    """
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    # Prevent duplicate handlers
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    )
    logger.addHandler(console_handler)

    return logger
