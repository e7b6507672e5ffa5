from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

CORS_METHODS = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type"]

cors = CORS()
limiter = Limiter(key_func=get_remote_address, default_limits=[])
