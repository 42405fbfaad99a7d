import os
import logging
from typing import Any
from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT : str = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


class Config:
    SQLALCHEMY_DATABASE_URI : str = os.getenv('DATABASE_URL', 'sqlite:///blog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS : bool = False
    HOST : str = os.getenv('HOST', '0.0.0.0')
    PORT : int = int(os.getenv('PORT', '5000'))
    CORS_ORIGINS : str = os.getenv('CORS_ORIGINS', '*')
    LOG_LEVEL : str = os.getenv('LOG_LEVEL', 'INFO')
    JSON_SORT_KEYS : bool = False


class ClientConfig:
    API_URL : str = os.getenv('BLOG_API_URL', 'http://localhost:5000')
    TIMEOUT : float = float(os.getenv('BLOG_API_TIMEOUT', '10'))


def configure_logging(level: Any = None) -> None:
    '''Install a single stream handler on the root logger.'''
    level = level or Config.LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    root : logging.Logger = logging.getLogger()
    if not root.handlers:
        handler : logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
