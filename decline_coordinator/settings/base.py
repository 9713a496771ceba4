import os
from os.path import abspath, dirname, join

from decline_coordinator.settings.utils import get_logger_config

# PATH vars
PROJECT_ROOT = join(abspath(dirname(__file__)), "..")


def root(*path_fragments):
    return join(abspath(PROJECT_ROOT), *path_fragments)


# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get('DECLINE_COORDINATOR_SECRET_KEY', 'insecure-secret-key')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False

ALLOWED_HOSTS = []

# Application definition

INSTALLED_APPS = (
    'django.contrib.auth',
    'django.contrib.contenttypes',
)

THIRD_PARTY_APPS = (
    'rest_framework',
)

PROJECT_APPS = (
    'decline_coordinator.apps.core',
    'decline_coordinator.apps.charges.apps.ChargesConfig',
    'decline_coordinator.apps.stripe',
    'decline_coordinator.apps.subscriptions',
)

INSTALLED_APPS += THIRD_PARTY_APPS
INSTALLED_APPS += PROJECT_APPS

# CACHE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#caches
# DRF throttling keeps its counters here.
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}
# END CACHE CONFIGURATION

MIDDLEWARE = (
    # Resets RequestCache utility for added safety.
    'edx_django_utils.cache.middleware.RequestCacheMiddleware',
    'django.middleware.locale.LocaleMiddleware',
    'django.middleware.common.CommonMiddleware',
)

ROOT_URLCONF = 'decline_coordinator.urls'

# Database
# The service keeps no state of its own; Django only needs a database for the contrib apps.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': root('default.db'),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# Celery
CELERY_TASK_DEFAULT_EXCHANGE = 'decline_coordinator'
CELERY_TASK_DEFAULT_QUEUE = 'decline_coordinator.default'
CELERY_TASK_DEFAULT_ROUTING_KEY = 'decline_coordinator'

# Internationalization
# https://docs.djangoproject.com/en/dev/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

# DRF CONFIGURATION
REST_FRAMEWORK = {
    'EXCEPTION_HANDLER': 'decline_coordinator.apps.core.middleware.log_drf_exceptions',
    'DEFAULT_AUTHENTICATION_CLASSES': (),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.AllowAny',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'DEFAULT_THROTTLE_CLASSES': (
        'rest_framework.throttling.AnonRateThrottle',
    ),
    'DEFAULT_THROTTLE_RATES': {
        'anon': '600/minute',
    },
    'UNAUTHENTICATED_USER': None,
}
# END DRF CONFIGURATION

# Set up logging for development use (logging to stdout)
LOGGING = get_logger_config(debug=DEBUG)

# PAYMENT PROCESSING
PAYMENT_PROCESSOR_CONFIG = {
    'edx': {
        'stripe': {
            # current_period_end is read from the subscription itself, which later API versions moved onto items.
            'api_version': '2024-12-18.acacia',
            'enable_telemetry': None,
            'log_level': 'info',
            'max_network_retries': 0,
            'proxy': None,
            'secret_key': os.environ.get('DECLINE_COORDINATOR_STRIPE_SECRET_KEY', 'SET-ME-PLEASE'),
        },
    },
}
# END PAYMENT PROCESSING

# SUBSCRIPTION RENEWAL REMINDERS
SUBSCRIPTION_RENEWAL_REMINDER = {
    # Remind customers this many days before their yearly subscription renews.
    'target_days': 30,
    # Only subscriptions created at least this long ago can be nearing a yearly renewal.
    'minimum_age_days': 335,
    # Page size for Stripe list calls, 100 is the Stripe maximum.
    'page_size': 100,
}
# END SUBSCRIPTION RENEWAL REMINDERS
