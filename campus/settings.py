"""Django settings for the campus operations platform."""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_int(name: str, default: int) -> int:
    try:
        value = int(os.environ.get(name, ""))
    except ValueError:
        return default
    return value or default


SECRET_KEY = os.environ.get("CAMPUS_SECRET_KEY", "django-insecure-campus-operations-dev-key")
DEBUG = os.environ.get("CAMPUS_DEBUG", "true").lower() == "true"
ALLOWED_HOSTS: list[str] = os.environ.get("CAMPUS_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "academics.apps.AcademicsConfig",
    "facilities.apps.FacilitiesConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "campus.middleware.CampusErrorMiddleware",
]

ROOT_URLCONF = "campus.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "campus.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": os.environ.get("DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("DB_NAME", str(BASE_DIR / "campus.db")),
        "USER": os.environ.get("DB_USER", ""),
        "PASSWORD": os.environ.get("DB_PASSWORD", ""),
        "HOST": os.environ.get("DB_HOST", ""),
        "PORT": os.environ.get("DB_PORT", ""),
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
    },
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        name: {
            "handlers": ["console"],
            "level": os.environ.get("CAMPUS_LOG_LEVEL", "INFO"),
            "propagate": True,
        }
        for name in ("campus", "academics", "facilities")
    },
}

# Admission limits and default-course selection for newly created students.
# The letter-grade table is fixed and lives in academics.grading.
ACADEMIC_POLICY = {
    "COURSE_LIMIT": 6,
    "CREDIT_LIMIT": 18,
    "CREDIT_MIN": 6,
    "DEFAULT_COURSE_CODES": [
        code.strip().upper()
        for code in os.environ.get("DEFAULT_FIRST_YEAR_COURSE_CODES", "").split(",")
        if code.strip()
    ],
    "DEFAULT_COURSE_COUNT": _env_int("DEFAULT_FIRST_YEAR_COURSE_COUNT", 3),
}
