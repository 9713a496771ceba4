from decline_coordinator.settings.base import *

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1']

# CELERY
# Assume the local broker is a Redis container on the default port.
CELERY_BROKER_URL = os.environ.get('CELERY_BROKER_URL', 'redis://localhost:6379/0')

LOGGING = get_logger_config(debug=DEBUG)

# Keep anonymous throttling out of the way while developing.
REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES'] = ()

#####################################################################
# Lastly, see if the developer has any local overrides.
if os.path.isfile(join(dirname(abspath(__file__)), 'private.py')):
    from .private import *  # pylint: disable=import-error
