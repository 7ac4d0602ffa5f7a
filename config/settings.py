from pathlib import Path
from decouple import config


# BASE DIRECTORY
# Build paths inside the project like this: BASE_DIR / 'subdir'
# BASE_DIR points to the project root (where manage.py is)
BASE_DIR = Path(__file__).resolve().parent.parent


# SECURITY SETTINGS

# SECURITY WARNING: keep the secret key used in production secret!
# Generate new key: python -c 'from django.core.management.utils import get_random_secret_key; print(get_random_secret_key())'
SECRET_KEY = config('SECRET_KEY', default='django-insecure-CHANGE-THIS-IN-PRODUCTION')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config('DEBUG', default=True, cast=bool)

# Allowed hosts (domains that can access this application)
# Format: 'domain.com,www.domain.com,api.domain.com'
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1,0.0.0.0,testserver').split(',')


# INSTALLED APPS

INSTALLED_APPS = [
    # Django built-in apps
    'django.contrib.admin',  # Admin interface (also provides the staff login)
    'django.contrib.auth',  # Authentication framework
    'django.contrib.contenttypes',  # Content types framework
    'django.contrib.sessions',  # Session framework
    'django.contrib.messages',  # Messaging framework
    'django.contrib.staticfiles',  # Static files management

    # Third-party apps
    'rest_framework',  # Django REST Framework (location API)
    'corsheaders',  # CORS headers support
    'crispy_forms',  # Better form rendering
    'crispy_bootstrap5',  # Bootstrap 5 template pack

    # Our custom apps
    'apps.locations',  # State / District / Mandal registry
    'apps.leads',  # Lead capture forms
]


# MIDDLEWARE

# Each request passes through these in order (top to bottom)
# Each response passes through in reverse order (bottom to top)
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',  # Security enhancements
    'django.contrib.sessions.middleware.SessionMiddleware',  # Session support
    'corsheaders.middleware.CorsMiddleware',  # CORS support (must be before CommonMiddleware)
    'django.middleware.common.CommonMiddleware',  # Common utilities
    'django.middleware.csrf.CsrfViewMiddleware',  # CSRF protection
    'django.contrib.auth.middleware.AuthenticationMiddleware',  # Authentication
    'django.contrib.messages.middleware.MessageMiddleware',  # Messages framework
    'django.middleware.clickjacking.XFrameOptionsMiddleware',  # Clickjacking protection
]


# URL CONFIGURATION

ROOT_URLCONF = 'config.urls'


# TEMPLATES
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',

        # Directories where Django looks for templates
        'DIRS': [
            BASE_DIR / 'templates',  # Global templates directory
        ],

        # Look for templates inside each app's templates/ directory
        'APP_DIRS': True,

        # Context processors: variables available in all templates
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',  # Debug info
                'django.template.context_processors.request',  # Request object
                'django.contrib.auth.context_processors.auth',  # User object
                'django.contrib.messages.context_processors.messages',  # Messages
            ],
        },
    },
]


# ASGI/WSGI APPLICATION

ASGI_APPLICATION = 'config.asgi.application'
WSGI_APPLICATION = 'config.wsgi.application'


# DATABASE

# Leads live in the remote Lead API; the local database only holds
# staff accounts and sessions.
# Set DB_ENGINE=django.db.backends.postgresql (and DB_*) for production.
DB_ENGINE = config('DB_ENGINE', default='django.db.backends.sqlite3')

if DB_ENGINE == 'django.db.backends.sqlite3':
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': config('DB_NAME', default=str(BASE_DIR / 'db.sqlite3')),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': config('DB_NAME', default='leaddesk_db'),
            'USER': config('DB_USER', default='leaddesk_user'),
            'PASSWORD': config('DB_PASSWORD', default='leaddesk_pass'),
            'HOST': config('DB_HOST', default='db'),  # 'db' is Docker service name
            'PORT': config('DB_PORT', default='5432'),

            # Keep connection open for 10 minutes
            'CONN_MAX_AGE': 600,

            'OPTIONS': {
                'connect_timeout': 10,  # Timeout if connection fails
            }
        }
    }


# CACHE

# Lead filter options are cached here
CACHES = {
    'default': {
        'BACKEND': config('CACHE_BACKEND', default='django.core.cache.backends.locmem.LocMemCache'),
        'LOCATION': config('CACHE_LOCATION', default='leaddesk'),
    }
}


# AUTHENTICATION

# Internal forms use the admin login screen
LOGIN_URL = 'admin:login'
LOGIN_REDIRECT_URL = '/leads/individual/'


# INTERNATIONALIZATION

LANGUAGE_CODE = 'en-us'

# List: https://en.wikipedia.org/wiki/List_of_tz_database_time_zones
TIME_ZONE = 'Asia/Kolkata'

USE_I18N = True

# All datetimes in database are stored in UTC
USE_TZ = True


# STATIC FILES (CSS, JavaScript, Images)

STATIC_URL = '/static/'

# Directory where collectstatic command collects all static files
STATIC_ROOT = BASE_DIR / 'staticfiles'


# CRISPY FORMS (Form Styling)
# We use Bootstrap 5 for styling
CRISPY_ALLOWED_TEMPLATE_PACKS = 'bootstrap5'
CRISPY_TEMPLATE_PACK = 'bootstrap5'


# DJANGO REST FRAMEWORK (API)

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
    ],

    # Location endpoints opt out with AllowAny
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],

    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
}


# CORS HEADERS (Cross-Origin Resource Sharing)

# The location API is read by the marketing site as well
if DEBUG:
    CORS_ALLOW_ALL_ORIGINS = True
else:
    CORS_ALLOWED_ORIGINS = [
        origin for origin in config('CORS_ALLOWED_ORIGINS', default='').split(',') if origin
    ]

CORS_URLS_REGEX = r'^/locations/api/.*$'


# CELERY (Background Tasks)

# Celery broker URL (where tasks are queued)
CELERY_BROKER_URL = config('REDIS_URL', default='redis://redis:6379/0')

# Click tracking is fire-and-forget, no result backend needed
CELERY_TASK_IGNORE_RESULT = True

# Celery task serialization format
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'

# Celery timezone
CELERY_TIMEZONE = TIME_ZONE

# Run tasks inline (development without a broker)
CELERY_TASK_ALWAYS_EAGER = config('CELERY_TASK_ALWAYS_EAGER', default=False, cast=bool)

# Celery task time limit (1 minute)
CELERY_TASK_TIME_LIMIT = 60


# LOGGING

LOG_DIR = BASE_DIR / 'logs'
LOG_DIR.mkdir(exist_ok=True)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,

    # Log formatters
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },

    # Log handlers (where to send logs)
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': LOG_DIR / 'django.log',
            'maxBytes': 1024 * 1024 * 10,  # 10 MB
            'backupCount': 5,
            'formatter': 'verbose',
        },
    },

    # Loggers
    'loggers': {
        'django': {
            'handlers': ['console', 'file'],
            'level': config('LOG_LEVEL', default='INFO'),
            'propagate': True,
        },
        'apps': {  # Our custom apps
            'handlers': ['console', 'file'],
            'level': config('APPS_LOG_LEVEL', default='DEBUG'),
            'propagate': False,
        },
    },
}


# CUSTOM SETTINGS

# Remote Lead API
LEAD_API_URL = config('LEAD_API_URL', default='http://localhost:5000/api')
LEAD_API_TOKEN = config('LEAD_API_TOKEN', default='')
LEAD_API_TIMEOUT = config('LEAD_API_TIMEOUT', default=30, cast=int)

# Filter options (quotas, genders...) change rarely: cache for 5 minutes
LEAD_FILTER_OPTIONS_CACHE_SECONDS = config('LEAD_FILTER_OPTIONS_CACHE_SECONDS', default=300, cast=int)

# Thank-you screen stays up this long before the empty form comes back
LEAD_FORM_SUCCESS_REDIRECT_SECONDS = config('LEAD_FORM_SUCCESS_REDIRECT_SECONDS', default=3, cast=int)

# Dashboard lead pages: {LEADS_DASHBOARD_URL}/{lead_id}
LEADS_DASHBOARD_URL = config('LEADS_DASHBOARD_URL', default='')

# Internal staff form starts with this state selected
INTERNAL_LEAD_DEFAULT_STATE = config('INTERNAL_LEAD_DEFAULT_STATE', default='Andhra Pradesh')

# Location dataset (dotted path to a sequence of state records)
LOCATIONS_DATASET = config('LOCATIONS_DATASET', default='apps.locations.data.INDIA_LOCATIONS')


# SECURITY SETTINGS (Production)

if not DEBUG:
    # HTTPS/SSL settings
    SECURE_SSL_REDIRECT = True
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True

    # Security headers
    SECURE_CONTENT_TYPE_NOSNIFF = True
    X_FRAME_OPTIONS = 'DENY'

    # HSTS (HTTP Strict Transport Security)
    SECURE_HSTS_SECONDS = 31536000  # 1 year
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = True


# DEFAULT AUTO FIELD

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
