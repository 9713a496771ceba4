"""Tests for stripe app clients.py."""

from unittest.mock import MagicMock, patch

import ddt
import stripe
from django.conf import settings
from django.test import SimpleTestCase, override_settings
from testfixtures import LogCapture

from decline_coordinator.apps.core.serializers import CoordinatorValidationException
from decline_coordinator.apps.stripe.clients import StripeAPIClient

# Sentinel values.
TEST_PRICE_ID = 'price_1AbCdEfGhIjKlMnOp'
TEST_SUBSCRIPTION_ID = 'sub_1AbCdEfGhIjKlMnOp'
TEST_CREATED_BEFORE = 1700000000

# Build test PAYMENT_PROCESSOR_CONFIG with sentinel value for Stripe's secret_key.
TEST_SECRET = 'TEST_SECRET'
TEST_PAYMENT_PROCESSOR_CONFIG = {
    'edx': {
        'stripe': dict(settings.PAYMENT_PROCESSOR_CONFIG['edx']['stripe'], secret_key=TEST_SECRET),
    },
}

log_name = 'decline_coordinator.apps.stripe.clients'


@ddt.ddt
@override_settings(PAYMENT_PROCESSOR_CONFIG=TEST_PAYMENT_PROCESSOR_CONFIG)
class TestStripeAPIClient(SimpleTestCase):
    """Tests for StripeAPIClient."""

    def setUp(self):
        self.client = StripeAPIClient()

    def test_configures_stripe(self):
        self.assertEqual(stripe.api_key, TEST_SECRET)
        self.assertEqual(stripe.api_version, TEST_PAYMENT_PROCESSOR_CONFIG['edx']['stripe']['api_version'])
        self.assertEqual(stripe.max_network_retries, 0)

    @patch('stripe.Plan.list')
    def test_list_plans_success(self, mock_list):
        mock_list.return_value = MagicMock(data=[{'id': 'plan_1', 'interval': 'year'}])

        self.assertEqual(self.client.list_plans(limit=10), mock_list.return_value)
        mock_list.assert_called_once_with(limit=10)

    @patch('stripe.Plan.list')
    def test_list_plans_error(self, mock_list):
        mock_list.side_effect = stripe.APIConnectionError('Network error')

        with LogCapture(log_name) as log_capture:
            with self.assertRaises(stripe.APIConnectionError):
                self.client.list_plans()

        log_capture.check_present(
            (log_name, 'ERROR', "StripeAPIClient.list_plans threw [Network error] with args: [{'limit': 100}].")
        )

    @ddt.data(0, 101, 'many')
    @patch('stripe.Plan.list')
    def test_list_plans_invalid_limit(self, limit, mock_list):
        with self.assertRaises(CoordinatorValidationException):
            self.client.list_plans(limit=limit)
        mock_list.assert_not_called()

    @patch('stripe.Subscription.list')
    def test_list_subscriptions_first_page(self, mock_list):
        mock_list.return_value = MagicMock(data=[{'id': TEST_SUBSCRIPTION_ID}], has_more=False)

        output = self.client.list_subscriptions(TEST_PRICE_ID, TEST_CREATED_BEFORE, limit=100)

        self.assertEqual(output, mock_list.return_value)
        mock_list.assert_called_once_with(
            price=TEST_PRICE_ID,
            limit=100,
            created={'lte': TEST_CREATED_BEFORE},
        )

    @patch('stripe.Subscription.list')
    def test_list_subscriptions_next_page(self, mock_list):
        mock_list.return_value = MagicMock(data=[], has_more=False)

        self.client.list_subscriptions(TEST_PRICE_ID, TEST_CREATED_BEFORE, starting_after=TEST_SUBSCRIPTION_ID)

        mock_list.assert_called_once_with(
            price=TEST_PRICE_ID,
            limit=100,
            created={'lte': TEST_CREATED_BEFORE},
            starting_after=TEST_SUBSCRIPTION_ID,
        )

    @patch('stripe.Subscription.list')
    def test_list_subscriptions_error(self, mock_list):
        mock_list.side_effect = stripe.InvalidRequestError('No such price', 'price')

        with LogCapture(log_name) as log_capture:
            with self.assertRaises(stripe.InvalidRequestError):
                self.client.list_subscriptions(TEST_PRICE_ID, TEST_CREATED_BEFORE)

        self.assertIn('StripeAPIClient.list_subscriptions threw', str(log_capture))

    @ddt.data(
        {'price_id': '', 'created_before': TEST_CREATED_BEFORE},
        {'price_id': TEST_PRICE_ID, 'created_before': -1},
        {'price_id': TEST_PRICE_ID, 'created_before': TEST_CREATED_BEFORE, 'limit': 1000},
    )
    @patch('stripe.Subscription.list')
    def test_list_subscriptions_invalid_input(self, kwargs, mock_list):
        with self.assertRaises(CoordinatorValidationException):
            self.client.list_subscriptions(**kwargs)
        mock_list.assert_not_called()
