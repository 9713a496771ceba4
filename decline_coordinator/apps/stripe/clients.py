"""
API clients for Stripe.
"""

import stripe
from celery.utils.log import get_task_logger
from django.conf import settings

from decline_coordinator.apps.core import serializers

# Use special Celery logger for tasks client calls.
logger = get_task_logger(__name__)


class StripeAPIClient:
    """
    API client for calls to Stripe using API key.
    """

    def __init__(self):
        configuration = settings.PAYMENT_PROCESSOR_CONFIG['edx']['stripe']
        # The secret API key used by the backend to communicate with Stripe. Private/secret.
        stripe.api_key = configuration['secret_key']
        # Stripe API version to use. Will use latest allowed in Stripe Dashboard if None.
        stripe.api_version = configuration['api_version']
        # Send anonymous latency metrics to Stripe.
        stripe.enable_telemetry = configuration['enable_telemetry']
        # Stripe client logging level. None will default to INFO.
        stripe.log = configuration['log_level']
        # How many times to automatically retry requests. None means no retries.
        stripe.max_network_retries = configuration['max_network_retries']
        # Send requests somewhere else instead of Stripe. May be useful for testing.
        stripe.proxy = configuration['proxy']

    def list_plans(self, limit=100):
        """
        List Stripe Plans.

        Args:
            limit (int): Page size, 1 to 100.

        Returns:
            The response from Stripe, a ListObject of Plans.

        See:
            https://stripe.com/docs/api/plans/list
        """
        # Save arguments.
        initial_locals = dict(locals())
        del initial_locals['self']

        logger.info('StripeAPIClient.list_plans called with '
                    f'args: [{initial_locals}].')

        class ListPlansInputSerializer(serializers.CoordinatorSerializer):
            '''Serializer for StripeAPIClient.list_plans.'''
            limit = serializers.IntegerField(min_value=1, max_value=100)

        ListPlansInputSerializer(data=initial_locals).is_valid(raise_exception=True)

        try:
            stripe_response = stripe.Plan.list(limit=limit)
            logger.debug('StripeAPIClient.list_plans called with '
                         f'args: [{initial_locals}] '
                         'returned stripe_response: '
                         f'[{stripe_response}].')
        except stripe.StripeError as exc:
            logger.error('StripeAPIClient.list_plans threw '
                         f'[{exc}] with '
                         f'args: [{initial_locals}].')
            raise

        return stripe_response

    def list_subscriptions(self, price_id, created_before, limit=100, starting_after=None):
        """
        List one page of the Stripe Subscriptions on a price.

        Args:
            price_id (str): The Stripe Price or Plan id the subscriptions are on.
            created_before (int): Unix timestamp, only subscriptions created at or before it are listed.
            limit (int): Page size, 1 to 100.
            starting_after (str or None): Subscription id to continue listing after, for pagination.

        Returns:
            The response from Stripe, a ListObject of Subscriptions with has_more set.

        See:
            https://stripe.com/docs/api/subscriptions/list
        """
        # Save arguments.
        initial_locals = dict(locals())
        del initial_locals['self']

        logger.info('StripeAPIClient.list_subscriptions called with '
                    f'args: [{initial_locals}].')

        class ListSubscriptionsInputSerializer(serializers.CoordinatorSerializer):
            '''Serializer for StripeAPIClient.list_subscriptions.'''
            price_id = serializers.CharField()
            created_before = serializers.IntegerField(min_value=0)
            limit = serializers.IntegerField(min_value=1, max_value=100)
            starting_after = serializers.CharField(allow_null=True, required=False)

        ListSubscriptionsInputSerializer(data=initial_locals).is_valid(raise_exception=True)

        params = {
            'price': price_id,
            'limit': limit,
            'created': {
                'lte': created_before,
            },
        }
        if starting_after:
            params['starting_after'] = starting_after

        try:
            stripe_response = stripe.Subscription.list(**params)
            logger.debug('StripeAPIClient.list_subscriptions called with '
                         f'args: [{initial_locals}] '
                         'returned stripe_response: '
                         f'[{stripe_response}].')
            logger.info('StripeAPIClient.list_subscriptions called with '
                        f'args: [{initial_locals}] '
                        f'returned [{len(stripe_response.data)}] subscriptions, '
                        f'has_more: [{stripe_response.has_more}].')
        except stripe.StripeError as exc:
            logger.error('StripeAPIClient.list_subscriptions threw '
                         f'[{exc}] with '
                         f'args: [{initial_locals}].')
            raise

        return stripe_response
