"""
Base settings for the storefront checkout backend.

Secrets come from the environment (a local ``.env`` is loaded first).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def _env_list(name, default=""):
    return [v.strip() for v in os.getenv(name, default).split(",") if v.strip()]


def _env_bool(name, default="true"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "")
DEBUG = _env_bool("DJANGO_DEBUG", "false")
ALLOWED_HOSTS = _env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "corsheaders",
    "checkout.apps.CheckoutAppConfig",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "storefront.urls"
WSGI_APPLICATION = "storefront.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("SQLITE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True
TIME_ZONE = "Asia/Kolkata"
STATIC_URL = "/static/"

# ---------- Razorpay ----------
# Amounts are always integer paise.
RAZORPAY = {
    "KEY_ID": os.getenv("RAZORPAY_KEY_ID", ""),
    "KEY_SECRET": os.getenv("RAZORPAY_KEY_SECRET", ""),
    # checkout signatures are HMACs keyed with the key secret unless overridden
    "SIGNING_SECRET": os.getenv("RAZORPAY_SIGNING_SECRET", ""),
    "BASE_URL": os.getenv("RAZORPAY_BASE_URL", "https://api.razorpay.com/v1"),
    "CURRENCY": "INR",
    "TIMEOUT": float(os.getenv("RAZORPAY_TIMEOUT", "30")),
    "RECONCILE_AMOUNT": _env_bool("RAZORPAY_RECONCILE_AMOUNT", "true"),
}

# ---------- Firebase (ID token verification) ----------
FIREBASE = {
    "PROJECT_ID": os.getenv("FIREBASE_PROJECT_ID", ""),
    "SERVICE_ACCOUNT_BASE64": os.getenv("FIREBASE_SERVICE_ACCOUNT_BASE64", ""),
}

# ---------- CORS ----------
CORS_ALLOWED_ORIGINS = _env_list(
    "CORS_ALLOWED_ORIGINS",
    "https://ermunaiorganicfarmfoods.com,"
    "https://www.ermunaiorganicfarmfoods.com,"
    "https://ermunai-user-project.onrender.com,"
    "http://localhost,"
    "http://127.0.0.1:5500",
)
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_HEADERS = ["content-type", "authorization", "x-requested-with"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "checkout": {
            "handlers": ["console"],
            "level": os.getenv("CHECKOUT_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
