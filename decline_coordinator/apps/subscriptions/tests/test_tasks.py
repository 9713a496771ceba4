"""Tests for subscription Celery tasks."""

from unittest.mock import patch

from django.test import SimpleTestCase

from decline_coordinator.apps.subscriptions.tasks import collect_renewal_reminder_targets


class CollectRenewalReminderTargetsTests(SimpleTestCase):
    """Tests for collect_renewal_reminder_targets."""

    @patch('decline_coordinator.apps.subscriptions.tasks.RenewalReminder')
    def test_returns_subscription_ids(self, mock_reminder):
        mock_reminder.return_value.get_notification_target_subscriptions.return_value = [
            {'id': 'sub_1', 'current_period_end': 1},
            {'id': 'sub_2', 'current_period_end': 2},
        ]

        result = collect_renewal_reminder_targets.apply(kwargs={'target_days': 7}).get()

        self.assertEqual(result, ['sub_1', 'sub_2'])
        mock_reminder.return_value.get_notification_target_subscriptions.assert_called_once_with(target_days=7)

    @patch('decline_coordinator.apps.subscriptions.tasks.RenewalReminder')
    def test_defaults_to_configured_days(self, mock_reminder):
        mock_reminder.return_value.get_notification_target_subscriptions.return_value = []

        self.assertEqual(collect_renewal_reminder_targets(), [])
        mock_reminder.return_value.get_notification_target_subscriptions.assert_called_once_with(target_days=None)
