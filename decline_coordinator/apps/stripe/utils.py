"""
Utils for stripe app.
"""
from decline_coordinator.apps.charges.api import get_message_from_stripe_error
from decline_coordinator.apps.charges.constants import BASE_LOCALE


def get_stripe_error_payload(exc):
    """
    Get the error payload Stripe sent with an exception.

        Arguments:
            exc (stripe.StripeError): e.g. a CardError raised by a PaymentIntent call.

        Returns:
            The error object from the response body, e.g. {'type': 'card_error', 'decline_code': ...}, or an empty
            dict for errors that came without one, such as connection errors.
    """
    error = getattr(exc, 'error', None)
    return error.to_dict() if error is not None else {}


def get_user_message_for_stripe_exception(exc, locale=BASE_LOCALE):
    """
    End user message for the decline code of a Stripe exception, None when it has no known decline code.
        Arguments:
            exc (stripe.StripeError): The exception raised by the Stripe SDK.
            locale (str or Locale): Locale of the message.
    """
    return get_message_from_stripe_error(get_stripe_error_payload(exc), locale)
