import logging
from .config import Config

logger = logging.getLogger('twitter_api')
logger.setLevel(getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO))
