from .base import *  # noqa: F403

# Production like is for things like nginx and a real database behind a proxy
DEBUG = False

ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "").split(",")  # noqa: F405
ALLOWED_HOSTS = [host.strip() for host in ALLOWED_HOSTS if host.strip()]

CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")  # noqa: F405
    if origin.strip()
]
CORS_ALLOW_CREDENTIALS = True

# Load CSRF trusted origins from environment
csrf_trusted_origins_env = os.getenv("CSRF_TRUSTED_ORIGINS", "")  # noqa: F405
if csrf_trusted_origins_env:
    CSRF_TRUSTED_ORIGINS = [
        origin.strip()
        for origin in csrf_trusted_origins_env.split(",")
        if origin.strip()
    ]
else:
    # Fallback to building from ALLOWED_HOSTS
    CSRF_TRUSTED_ORIGINS = ["https://" + host for host in ALLOWED_HOSTS]

# Security configs
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True

# Trust the proxy headers to determine HTTPS status
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True

validate_required_settings()  # noqa: F405
