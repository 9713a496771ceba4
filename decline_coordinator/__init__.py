"""
decline-coordinator module.
"""
# This will make sure the Celery app is always imported when Django starts so that the Celery shared_task decorator
# will use this app.
from .celery import app as celery_app

__all__ = ('celery_app',)

# This is the canonical Decline Coordinator version, used in pyproject.toml.
__version__ = '0.1.0'
