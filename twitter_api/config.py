from dotenv import load_dotenv
import os

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    TWITTER_CONSUMER_KEY = os.getenv('TWITTER_CONSUMER_KEY')
    TWITTER_CONSUMER_SECRET = os.getenv('TWITTER_CONSUMER_SECRET')
    TWITTER_ACCESS_TOKEN = os.getenv('TWITTER_ACCESS_TOKEN')
    TWITTER_ACCESS_SECRET = os.getenv('TWITTER_ACCESS_SECRET')

    TWITTER_API_URL = os.getenv('TWITTER_API_URL', 'https://api.twitter.com/1.1/')
    TWITTER_VERIFY_PEER = _flag('TWITTER_VERIFY_PEER', 'true')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
