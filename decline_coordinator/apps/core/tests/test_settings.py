"""
Tests for the settings modules.
"""
import importlib.util
import unittest

from django.conf import settings

from decline_coordinator.settings import base


class TestSettings(unittest.TestCase):
    """
    Test class for the test and local settings.
    """

    def test_stripe_config_inherits_base(self):
        stripe_config = settings.PAYMENT_PROCESSOR_CONFIG['edx']['stripe']
        self.assertEqual(stripe_config['secret_key'], 'SET-ME-PLEASE')
        self.assertEqual(set(stripe_config), set(base.PAYMENT_PROCESSOR_CONFIG['edx']['stripe']))
        self.assertEqual(stripe_config['api_version'], base.PAYMENT_PROCESSOR_CONFIG['edx']['stripe']['api_version'])

    def test_redis_broker_transport_installed(self):
        # local settings default to a Redis broker
        self.assertIsNotNone(importlib.util.find_spec('redis'))
