SECRET_KEY = "test-secret"

# Tests always run on the in-memory demo data.
API_CONFIG = {"base_url": "", "timeout": 1, "token": ""}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = (5, 10, 20, 50)
