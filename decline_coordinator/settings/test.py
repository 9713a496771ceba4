from decline_coordinator.settings.base import *

# PAYMENT PROCESSING
# Never pick up a real key from the environment.
PAYMENT_PROCESSOR_CONFIG['edx']['stripe']['secret_key'] = 'SET-ME-PLEASE'
# END PAYMENT PROCESSING

# IN-MEMORY TEST DATABASE
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'USER': '',
        'PASSWORD': '',
        'HOST': '',
        'PORT': '',
    },
}
# END IN-MEMORY TEST DATABASE

# Run Celery tasks inline.
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
