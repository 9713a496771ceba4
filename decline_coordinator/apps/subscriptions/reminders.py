"""
Subscription renewal reminders.

Finds the yearly subscriptions whose current period ends a set number of days from now, so their customers can be
reminded before they are charged again.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from django.conf import settings
from django.utils import timezone as django_timezone

from decline_coordinator.apps.stripe.clients import StripeAPIClient

logger = logging.getLogger(__name__)

YEARLY_INTERVAL = 'year'
SECONDS_PER_DAY = 24 * 60 * 60


class RenewalReminder:
    """
    Look up the subscriptions to send a renewal reminder for.

    Example:
        >>> RenewalReminder().get_notification_target_subscriptions(target_days=30)
        [<Subscription id=sub_... at ...>, ...]
    """

    def __init__(self, stripe_client: Optional[StripeAPIClient] = None):
        self.stripe_client = stripe_client or StripeAPIClient()
        self.config = settings.SUBSCRIPTION_RENEWAL_REMINDER

    def get_yearly_plans(self) -> List:
        """ Plans billed once a year """
        plans = self.stripe_client.list_plans(limit=self.config['page_size'])
        return [plan for plan in plans.data if plan['interval'] == YEARLY_INTERVAL]

    @staticmethod
    def get_last_subscription_id(subscriptions) -> str:
        """ Id of the last subscription on a page, to continue listing after """
        return subscriptions.data[-1]['id']

    def get_list_subscription_params(self, plan_id: str, last_id: str = '') -> dict:
        """
        Arguments for StripeAPIClient.list_subscriptions.

        Only subscriptions created at least minimum_age_days ago can be close to a yearly renewal.
        """
        created_before = django_timezone.now() - timedelta(days=self.config['minimum_age_days'])
        params = {
            'price_id': plan_id,
            'created_before': int(created_before.timestamp()),
            'limit': self.config['page_size'],
        }
        if last_id:
            params['starting_after'] = last_id
        return params

    def get_subscriptions(self, plan_id: str, last_id: str = '') -> List:
        """ Every subscription on a plan, following pages while Stripe reports has_more """
        subscriptions = []
        while True:
            page = self.stripe_client.list_subscriptions(**self.get_list_subscription_params(plan_id, last_id))
            subscriptions.extend(page.data)
            if not page.has_more or not page.data:
                return subscriptions
            last_id = self.get_last_subscription_id(page)

    def get_subscriptions_by_plans(self, plans) -> List:
        subscriptions = []
        for plan in plans:
            subscriptions.extend(self.get_subscriptions(plan['id']))
        return subscriptions

    @staticmethod
    def filter_subscriptions(subscriptions, today: Optional[datetime] = None, target_days: int = 30) -> List:
        """
        Keep the subscriptions whose current period ends target_days whole days after today.

        Args:
            subscriptions: Stripe Subscriptions.
            today: Aware datetime to count from, defaults to now.
            target_days: Days until the end of the current period.
        """
        today = today or django_timezone.now()

        def _days_remaining(subscription):
            period_end = datetime.fromtimestamp(subscription['current_period_end'], tz=timezone.utc)
            # Whole days, truncated towards zero.
            return int((period_end - today).total_seconds() / SECONDS_PER_DAY)

        return [subscription for subscription in subscriptions if _days_remaining(subscription) == target_days]

    def get_notification_target_subscriptions(self, target_days: Optional[int] = None) -> List:
        """ Yearly subscriptions whose current period ends in target_days, defaults to the configured target_days """
        if target_days is None:
            target_days = self.config['target_days']

        today = django_timezone.now()
        plans = self.get_yearly_plans()
        subscriptions = self.get_subscriptions_by_plans(plans)
        targets = self.filter_subscriptions(subscriptions, today=today, target_days=target_days)

        logger.info(
            'RenewalReminder found [%d] of [%d] subscriptions on [%d] yearly plans renewing in [%d] days.',
            len(targets), len(subscriptions), len(plans), target_days,
        )
        return targets
