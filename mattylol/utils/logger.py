"""Logging configuration for the matty.lol API proxies."""
import sys

from loguru import logger

from .config import config

# Remove default handler
logger.remove()

# Console handler. Serverless platforms collect stderr.
logger.add(
    sys.stderr,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level=config.log_level,
    colorize=True,
)

LOG_DIR = config.log_dir

# The deployed filesystem is read-only, so file sinks are opt-in
if LOG_DIR is not None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    logger.add(
        LOG_DIR / "mattylol_{time:YYYY-MM-DD}.log",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="1 day",
        retention="30 days",
        compression="zip",
    )

    # Upstream log - one line per outbound call
    logger.add(
        LOG_DIR / "upstream_{time:YYYY-MM-DD}.log",
        format="{time:YYYY-MM-DD HH:mm:ss} | {message}",
        level="INFO",
        filter=lambda record: "upstream" in record["extra"],
        rotation="1 day",
        retention="90 days",
    )

logger.configure(extra={"name": "mattylol"})


def get_logger(name: str):
    """Get a logger with the specified name."""
    return logger.bind(name=name)


def log_upstream(source: str, url: str, outcome: str):
    """Log an outbound call to the dedicated upstream log."""
    logger.bind(upstream=True, name="upstream").info(f"{source} GET {url} -> {outcome}")
