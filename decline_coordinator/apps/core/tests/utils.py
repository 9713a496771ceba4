'''Utilities to help test Decline Coordinator apps.'''

import random
import string


def name_test(name: str, test_packed_params):
    """
    Permits the naming of simple ddt packed tests in common collection containers

    NOTE: This may "feel weird" but it's the way the developers do it see
    `def annotated(str, list)` at https://ddt.readthedocs.io/en/latest/example.html
    """

    class WrappedTuple(tuple):
        pass

    class WrappedList(list):
        pass

    class WrappedDict(dict):
        pass

    wrapped_test_params = None
    if isinstance(test_packed_params, dict):
        wrapped_test_params = WrappedDict(test_packed_params)
    elif isinstance(test_packed_params, tuple):
        wrapped_test_params = WrappedTuple(test_packed_params)
    elif isinstance(test_packed_params, list):
        wrapped_test_params = WrappedList(test_packed_params)

    # pylint: disable-next=literal-used-as-attribute
    setattr(wrapped_test_params, "__name__", name)
    return wrapped_test_params


def random_unicode_str(ln: int):
    """ Generate a string of ln characters, at least one of them non ASCII, for feeding garbage to lookups. """

    uchars = ['\xe9', '\xf1', '\xfc', 'Đ', 'ř', 'ů', '\xc5', '\xdf', '\xe7', 'ı',
              'İ', 'Ａ', 'ﬄ', 'ℚ', '\xbd', '€', '₹', '\xa5', 'Ж', 'η',
              '글', 'ओ', 'କ', 'じ', '字', '\U0001f40d', '\U0001f496', '♒', '♘']

    chars = uchars + list(string.printable)

    retval = ''.join(random.choices(chars, k=ln - 1))
    retval += random.choice(uchars)  # ensure we get one unicode no matter what.

    assert len(retval) == ln
    return retval
