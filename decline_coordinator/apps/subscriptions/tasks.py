"""
Subscription Celery tasks
"""
from celery import shared_task
from celery.utils.log import get_task_logger

from decline_coordinator.apps.subscriptions.reminders import RenewalReminder

# Use the special Celery logger for our tasks
logger = get_task_logger(__name__)


@shared_task()
def collect_renewal_reminder_targets(target_days=None):
    """
    Collect the ids of yearly subscriptions that renew in target_days, for renewal reminder emails.

    Meant to run once a day, so every subscription is picked up exactly once.
    """
    logger.info(f'collect_renewal_reminder_targets called with target_days: [{target_days}].')

    targets = RenewalReminder().get_notification_target_subscriptions(target_days=target_days)
    subscription_ids = [subscription['id'] for subscription in targets]

    logger.info(f'collect_renewal_reminder_targets found subscriptions: {subscription_ids}.')
    return subscription_ids
