"""
Django settings for electgo project
Electronics shop + cyber cafe back office (inventory, sales, expenses, revenue)
"""

import dj_database_url
import sys
from pathlib import Path
import os

# ============================================
# LOAD ENVIRONMENT VARIABLES
# ============================================
from dotenv import load_dotenv
load_dotenv()

# ============================================
# BASE DIRECTORY
# ============================================
BASE_DIR = Path(__file__).resolve().parent.parent

# ============================================
# DEBUG SETTING (MUST BE DEFINED EARLY)
# ============================================
DEBUG = os.getenv("DEBUG", "False") == "True"

# Test runs (manage.py test or pytest) get the local defaults below
TESTING = 'test' in sys.argv or 'pytest' in sys.modules

# ============================================
# SECURITY SETTINGS
# ============================================
SECRET_KEY = os.getenv("SECRET_KEY")

if not SECRET_KEY:
    if DEBUG or TESTING:
        # Development fallback - NEVER use in production
        SECRET_KEY = 'django-insecure-dev-key-for-local-testing-only-change-in-production'
    else:
        raise ValueError(
            "SECRET_KEY environment variable is not set! "
            "Please set it in your deployment environment."
        )

ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

CSRF_TRUSTED_ORIGINS = [
    origin for origin in os.getenv('CSRF_TRUSTED_ORIGINS', 'http://localhost:3000,http://localhost:8000').split(',')
    if origin
]

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

# Security settings for production
if not DEBUG and not TESTING:
    SECURE_SSL_REDIRECT = True
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True
    SECURE_CONTENT_TYPE_NOSNIFF = True
    X_FRAME_OPTIONS = 'DENY'
    SECURE_HSTS_SECONDS = 31536000
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True

APPEND_SLASH = True

# ============================================
# INSTALLED APPLICATIONS
# ============================================
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.humanize',

    # REST framework
    'rest_framework',

    # project apps
    'inventory.apps.InventoryConfig',
    'sales.apps.SalesConfig',
    'expenses.apps.ExpensesConfig',
    'revenue.apps.RevenueConfig',
    'notifications.apps.NotificationsConfig',
]

# ============================================
# MIDDLEWARE
# ============================================
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# ============================================
# URL CONFIGURATION
# ============================================
ROOT_URLCONF = 'electgo.urls'

# ============================================
# TEMPLATES
# ============================================
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

# ============================================
# WSGI APPLICATION
# ============================================
WSGI_APPLICATION = 'electgo.wsgi.application'

# ============================================
# DATABASE CONFIGURATION
# ============================================
# Django opens one connection per request thread and keeps it for
# CONN_MAX_AGE seconds; request_finished closes expired connections.
if DEBUG or TESTING or 'runserver' in sys.argv:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }
else:
    DATABASE_URL = os.getenv('DATABASE_URL') or os.getenv('POSTGRESQL_URL')

    if DATABASE_URL:
        DATABASES = {
            'default': dj_database_url.parse(DATABASE_URL, conn_max_age=600)
        }
    else:
        db_config = {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv('POSTGRES_DB', 'electgo'),
            'USER': os.getenv('POSTGRES_USER', 'electgo'),
            'PASSWORD': os.getenv('POSTGRES_PASSWORD', ''),
            'HOST': os.getenv('POSTGRES_HOST', 'localhost'),
            'PORT': os.getenv('POSTGRES_PORT', '5432'),
            'CONN_MAX_AGE': 600,
        }

        if db_config['PASSWORD']:
            DATABASES = {'default': db_config}
        else:
            # Ultimate fallback to SQLite (not recommended for production)
            print("⚠️  WARNING: No PostgreSQL credentials found, falling back to SQLite")
            DATABASES = {
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': BASE_DIR / 'db.sqlite3',
                }
            }

# ============================================
# PASSWORD VALIDATION
# ============================================
AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator', 'OPTIONS': {'min_length': 8}},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

# ============================================
# INTERNATIONALIZATION
# ============================================
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Africa/Nairobi'
USE_I18N = True
USE_TZ = True

# ============================================
# STORAGE CONFIGURATION
# ============================================
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

WHITENOISE_KEEP_ONLY_HASHED_FILES = not DEBUG
WHITENOISE_AUTOREFRESH = DEBUG
WHITENOISE_MAX_AGE = 31536000 if not DEBUG else 0

# ============================================
# STATIC FILES (admin + browsable API assets)
# ============================================
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / "staticfiles"

# ============================================
# REST FRAMEWORK CONFIGURATION
# ============================================
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
    ],

    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],

    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ],

    'EXCEPTION_HANDLER': 'electgo.exceptions.api_exception_handler',

    'COERCE_DECIMAL_TO_STRING': False,
    'DATETIME_FORMAT': '%Y-%m-%d %H:%M:%S',
    'DATE_FORMAT': '%Y-%m-%d',
    'TIME_FORMAT': '%H:%M:%S',
}

# ============================================
# INVENTORY MANAGEMENT CONFIGURATION
# ============================================
INVENTORY_CONFIG = {
    'LOW_STOCK_THRESHOLD': 5,
    'SERVICE_CATEGORY': 'Service',
    'LOW_STOCK_ALERT_EMAILS': [
        email.strip() for email in os.getenv('LOW_STOCK_ALERT_EMAILS', '').split(',') if email.strip()
    ],
}

# ============================================
# SALES CONFIGURATION
# ============================================
# Single source of truth for fixed-price services. Sales of these names never
# touch stock; GET /api/sales/services/ hands the same list to the UI.
SALES_CONFIG = {
    'SERVICE_ITEMS': [
        "Internet Time (per hour)",
        "Photocopying B/W",
        "Photocopying Colour",
        "Printing B/W",
        "Printing Colour",
        "Software Installation",
        "Data Recovery",
        "Network Setup",
        "KRA iTax",
        "eCitizen",
        "NTSA Services",
        "Social Health Authority (SHA)",
        "Printing Services",
        "Internet Access",
        "Scanning Services",
        "Passport Application",
        "Passport Photo",
        "KRA PIN retrieval",
        "Business Registration",
    ],
    'UNKNOWN_ITEM_LABEL': 'Unknown Item',
    'BEST_SELLERS_LIMIT': 5,
}

# ============================================
# EXPENSE CONFIGURATION
# ============================================
EXPENSE_CATEGORIES = [
    "Rent",
    "Utilities",
    "Internet",
    "Equipment",
    "Supplies",
    "Maintenance",
    "Marketing",
    "Insurance",
    "Transportation",
    "Other",
]

# ============================================
# COMPANY INFORMATION
# ============================================
ELECTGO_COMPANY_NAME = os.getenv('COMPANY_NAME', 'CyberSmater')
ELECTGO_CURRENCY = 'KES'

# ============================================
# EMAIL CONFIGURATION
# ============================================
EMAIL_HOST_USER = os.getenv('EMAIL_HOST_USER', '')
EMAIL_HOST_PASSWORD = os.getenv('EMAIL_HOST_PASSWORD', '')

if DEBUG:
    EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
else:
    EMAIL_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
    EMAIL_HOST = os.getenv('EMAIL_HOST', 'smtp.gmail.com')
    EMAIL_PORT = int(os.getenv('EMAIL_PORT', 587))
    EMAIL_USE_TLS = True
    EMAIL_TIMEOUT = int(os.getenv('EMAIL_TIMEOUT', 30))

DEFAULT_FROM_EMAIL = os.getenv(
    'DEFAULT_FROM_EMAIL',
    f'"{ELECTGO_COMPANY_NAME}" <{EMAIL_HOST_USER}>' if EMAIL_HOST_USER else 'noreply@electgo.local',
)
SERVER_EMAIL = DEFAULT_FROM_EMAIL

# ============================================
# LOGGING CONFIGURATION
# ============================================
LOGS_DIR = BASE_DIR / 'logs'
LOGS_DIR.mkdir(exist_ok=True)


def _rotating_file(filename, level='INFO'):
    return {
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': LOGS_DIR / filename,
        'maxBytes': 1024 * 1024 * 10,
        'backupCount': 5,
        'formatter': 'verbose',
        'level': level,
    }


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,

    'formatters': {
        'verbose': {
            'format': '[{levelname}] {asctime} {module} {process:d} {thread:d} - {message}',
            'style': '{',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
        'simple': {
            'format': '[{levelname}] {asctime} - {message}',
            'style': '{',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },

    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
            'level': 'INFO',
        },
        'file': _rotating_file('django.log'),
        'inventory_file': _rotating_file('inventory.log'),
        'sales_file': _rotating_file('sales.log'),
        'expenses_file': _rotating_file('expenses.log'),
        'notifications_file': _rotating_file('notifications.log'),
        'error_file': _rotating_file('errors.log', level='ERROR'),
    },

    'loggers': {
        'django': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.request': {
            'handlers': ['error_file', 'console'],
            'level': 'ERROR',
            'propagate': False,
        },
        'electgo': {
            'handlers': ['console', 'error_file'],
            'level': 'INFO',
            'propagate': False,
        },
        'inventory': {
            'handlers': ['console', 'inventory_file'],
            'level': 'INFO',
            'propagate': False,
        },
        'sales': {
            'handlers': ['console', 'sales_file'],
            'level': 'INFO',
            'propagate': False,
        },
        'expenses': {
            'handlers': ['console', 'expenses_file'],
            'level': 'INFO',
            'propagate': False,
        },
        'revenue': {
            'handlers': ['console', 'sales_file'],
            'level': 'INFO',
            'propagate': False,
        },
        'notifications': {
            'handlers': ['console', 'notifications_file'],
            'level': 'INFO',
            'propagate': False,
        },
    },

    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
}

# ============================================
# DEFAULT PRIMARY KEY FIELD TYPE
# ============================================
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ============================================
# SETTINGS VALIDATION
# ============================================
def validate_settings():
    """Validate critical settings on startup"""

    warnings = []

    if not DEBUG and DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3':
        warnings.append("⚠️  Using SQLite in production. Configure PostgreSQL for better performance.")

    if not DEBUG and not (EMAIL_HOST_USER and EMAIL_HOST_PASSWORD):
        warnings.append("⚠️  Email credentials missing! Alerts and reports cannot be sent.")
        warnings.append("   Set EMAIL_HOST_USER and EMAIL_HOST_PASSWORD in the environment.")

    if not INVENTORY_CONFIG['LOW_STOCK_ALERT_EMAILS']:
        warnings.append("⚠️  LOW_STOCK_ALERT_EMAILS is empty; send_low_stock_alert needs --email.")

    if warnings:
        print("\n" + "=" * 70)
        print("⚠️  SETTINGS WARNINGS:")
        for warning in warnings:
            print(f"   {warning}")
        print("=" * 70 + "\n")


# Run validation on startup
if 'runserver' in sys.argv or 'migrate' in sys.argv:
    validate_settings()
