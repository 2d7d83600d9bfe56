from .base import *  # noqa: F403

# Load DEBUG from environment - should be False in production
DEBUG = os.getenv("DEBUG", "False").lower() == "true"  # noqa: F405

allowed_hosts_env = os.getenv("ALLOWED_HOSTS", "")  # noqa: F405
if allowed_hosts_env:
    ALLOWED_HOSTS = [
        host.strip() for host in allowed_hosts_env.split(",") if host.strip()
    ]
else:
    # Fallback for development
    ALLOWED_HOSTS = [
        "127.0.0.1",
        "localhost",
    ]

INTERNAL_IPS = ["127.0.0.1"]

# CORS Configuration - Load from environment variables
cors_origins_env = os.getenv("CORS_ALLOWED_ORIGINS", "")  # noqa: F405
if cors_origins_env:
    CORS_ALLOWED_ORIGINS = [
        origin.strip() for origin in cors_origins_env.split(",") if origin.strip()
    ]
else:
    # Fallback for development if not set in .env
    CORS_ALLOWED_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite default port
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

CORS_ALLOW_CREDENTIALS = (
    os.getenv("CORS_ALLOW_CREDENTIALS", "True").lower() == "true"  # noqa: F405
)

# CSRF trusted origins mirror the CORS origins, plus https variants
csrf_trusted_origins = []
for origin in CORS_ALLOWED_ORIGINS:
    csrf_trusted_origins.append(origin)
    if origin.startswith("http://"):
        csrf_trusted_origins.append(origin.replace("http://", "https://"))

CSRF_TRUSTED_ORIGINS = csrf_trusted_origins

SIMPLE_JWT["AUTH_COOKIE_SECURE"] = False  # noqa: F405

validate_required_settings()  # noqa: F405
