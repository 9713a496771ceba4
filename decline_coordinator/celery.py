"""
Celery app needed to configure using Django settings, and make Celery tasks available to all of our Django apps.

https://docs.celeryproject.org/en/stable/django/first-steps-with-django.html
"""

import logging
import os

import celery
import django.conf

# Set the default configuration module, if one is not aleady defined.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'decline_coordinator.settings.local')

app = celery.Celery('decline-coordinator')
app.config_from_object('django.conf:settings', namespace='CELERY')

# Pick up tasks.py modules from every app in INSTALLED_APPS, e.g. the subscription renewal reminder.
app.autodiscover_tasks()


@celery.signals.after_setup_task_logger.connect
def on_after_setup_task_logger(**kwargs):
    """
    Log debug messages from tasks when the Django DEBUG setting is on.
    """
    if django.conf.settings.DEBUG:  # pragma no cover
        logger = kwargs["logger"]
        logger.setLevel(logging.DEBUG)
