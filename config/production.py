import os

from config import page_size_options

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("HR_API_URL", "http://localhost:5000/api"),
    "timeout": float(os.getenv("HR_API_TIMEOUT", "10")),
    "token": os.getenv("HR_API_TOKEN", ""),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
PAGE_SIZE_OPTIONS = page_size_options(os.getenv("PAGE_SIZE_OPTIONS", "5,10,20,50"))
