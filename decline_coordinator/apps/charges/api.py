"""
Public interface of the charges app: decline code lookups.

Every function here is a pure read of the decline code table. None of them raise for an unknown or missing
decline code, they answer with an empty result instead:

- get_decline_description() returns a DeclineCodeResult whose code is an empty dict.
- get_decline_message(), format_decline_message(), get_decline_category() and get_message_from_stripe_error()
  return None.
- is_hard_decline() and is_soft_decline() return False.

Example:
    >>> get_decline_message('insufficient_funds', Locale.JA)
    '別のお支払い方法を使用してもう一度お試しください。'
    >>> get_decline_category('fraudulent')
    <DeclineCategory.HARD_DECLINE: 'HARD_DECLINE'>
"""
import logging
import re
from collections.abc import Mapping
from typing import Dict, List, Optional, Union

from decline_coordinator.apps.charges.constants import BASE_LOCALE, DeclineCategory, DeclineCode, Locale
from decline_coordinator.apps.charges.data import DeclineCodeInfo, DeclineCodeResult
from decline_coordinator.apps.charges.decline_codes import DECLINE_CODES, DOC_VERSION

logger = logging.getLogger(__name__)


def _value_of(member_or_str):
    """ Enum members are looked up by their string value """
    return getattr(member_or_str, 'value', member_or_str)


def _get_info(code: Union[str, DeclineCode]) -> DeclineCodeInfo:
    """ Fetch the record for a code that already passed is_valid_decline_code() """
    return DECLINE_CODES[_value_of(code)]


def is_valid_decline_code(code: Union[str, DeclineCode]) -> bool:
    """
    Check whether code is exactly one of the known decline codes.

    Matching is case-sensitive with no trimming, so '', ' insufficient_funds' and 'insufficient' are all invalid.
    """
    code = _value_of(code)
    return isinstance(code, str) and code in DECLINE_CODES


def get_decline_description(code: Optional[Union[str, DeclineCode]] = None) -> DeclineCodeResult:
    """
    Get the guidance recorded for a decline code.

    Args:
        code: The Stripe decline code. May be None when no decline code is known yet.

    Returns:
        DeclineCodeResult with the table's doc_version, and either the DeclineCodeInfo or an empty dict when code is
        missing or unknown.
    """
    if not code or not is_valid_decline_code(code):
        logger.debug('get_decline_description has no decline code info for [%r].', code)
        return DeclineCodeResult(doc_version=DOC_VERSION, code={})

    return DeclineCodeResult(doc_version=DOC_VERSION, code=_get_info(code))


def get_decline_message(code: Union[str, DeclineCode], locale: Union[str, Locale] = BASE_LOCALE) -> Optional[str]:
    """
    Get the end user message for a decline code.

    Args:
        code: The Stripe decline code.
        locale: Locale or its string value, defaults to the base locale.

    Returns:
        The message, or None when the code is unknown or has no translation for locale. There is no fallback to the
        base locale message, callers that want one can ask for it.
    """
    if not is_valid_decline_code(code):
        return None

    info = _get_info(code)
    locale = _value_of(BASE_LOCALE if locale is None else locale)

    if locale == BASE_LOCALE.value:
        return info.next_user_action

    translation = info.translations.get(locale)
    return translation.next_user_action if translation else None


def get_all_decline_codes() -> List[str]:
    """ All known decline codes """
    return list(DECLINE_CODES)


def get_doc_version() -> str:
    """ The Stripe documentation revision (YYYY-MM-DD) the decline code table was transcribed from """
    return DOC_VERSION


def format_decline_message(
    code: Union[str, DeclineCode],
    locale: Union[str, Locale] = BASE_LOCALE,
    variables: Optional[Dict[str, str]] = None,
) -> Optional[str]:
    """
    Get the end user message for a decline code with {{name}} placeholders filled in.

    Args:
        code: The Stripe decline code.
        locale: Locale or its string value, defaults to the base locale.
        variables: Replacement text by placeholder name, e.g. {'merchantName': 'Acme Store'}.

    Returns:
        The message with every placeholder named in variables replaced. Placeholders without a variable are left as
        they are and variables the message doesn't use are ignored. None when get_decline_message() gives None.
    """
    message = get_decline_message(code, locale)

    if message is None or not variables:
        return message

    # Single pass over the supplied placeholders only, so replacement text is never itself treated as a template.
    placeholders = re.compile('|'.join(re.escape('{{' + name + '}}') for name in variables))
    return placeholders.sub(lambda match: variables[match.group(0)[2:-2]], message)


def get_decline_category(code: Union[str, DeclineCode]) -> Optional[DeclineCategory]:
    """ SOFT_DECLINE or HARD_DECLINE for a decline code, None when the code is unknown """
    if not is_valid_decline_code(code):
        return None

    return _get_info(code).category


def is_hard_decline(code: Union[str, DeclineCode]) -> bool:
    """ True if the decline is permanent and the card should not be retried. False for unknown codes. """
    return get_decline_category(code) == DeclineCategory.HARD_DECLINE


def is_soft_decline(code: Union[str, DeclineCode]) -> bool:
    """ True if the decline is transient and a retry makes sense. False for unknown codes. """
    return get_decline_category(code) == DeclineCategory.SOFT_DECLINE


def get_message_from_stripe_error(error, locale: Union[str, Locale] = BASE_LOCALE) -> Optional[str]:
    """
    Get the end user message for the decline code carried by a Stripe error.

    Only decline_code is read, from a mapping key or an attribute, so the error type is not checked here. Errors
    that aren't card declines simply carry no decline_code.

    Args:
        error: Stripe error payload, e.g. {'type': 'card_error', 'decline_code': 'insufficient_funds', ...}.
        locale: Locale or its string value, defaults to the base locale.

    Returns:
        get_decline_message() for the decline code, or None when the error has none.
    """
    if isinstance(error, Mapping):
        decline_code = error.get('decline_code')
    else:
        decline_code = getattr(error, 'decline_code', None)

    if not decline_code:
        return None

    return get_decline_message(decline_code, locale)
