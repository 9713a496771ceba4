"""
Decline Code Data Object Format
"""
from types import MappingProxyType
from typing import Dict, Mapping, Union

from attr.validators import deep_mapping, instance_of, min_len
from attrs import asdict, field, frozen

from decline_coordinator.apps.charges.constants import DeclineCategory

# More Information:
#   https://open-edx-proposals.readthedocs.io/en/latest/best-practices/oep-0049-django-app-patterns.html#data-py


def _locale_keyed(translations) -> Mapping[str, 'Translation']:
    """ Read-only copy of translations keyed by plain locale strings, so 'ja' and Locale.JA find the same entry """
    return MappingProxyType({getattr(locale, 'value', locale): t for locale, t in (translations or {}).items()})


@frozen
class Translation:
    """
    End user facing text in a non-base locale. Merchant next steps are English only and have no translation.
    """
    description: str = field(validator=[instance_of(str), min_len(1)])
    next_user_action: str = field(validator=[instance_of(str), min_len(1)])


@frozen
class DeclineCodeInfo:
    """
    Guidance for one decline code.

    Attributes:
        description: Why the payment was declined, merchant oriented.
        next_steps: What the merchant should do, English only.
        next_user_action: What to tell the end user, in the base locale.
        category: SOFT_DECLINE or HARD_DECLINE.
        translations: Translation per non-base locale. A locale may be missing for any code.
    """
    description: str = field(validator=[instance_of(str), min_len(1)])
    next_steps: str = field(validator=[instance_of(str), min_len(1)])
    next_user_action: str = field(validator=[instance_of(str), min_len(1)])
    category: DeclineCategory = field(validator=instance_of(DeclineCategory))
    translations: Mapping[str, Translation] = field(
        factory=dict,
        converter=_locale_keyed,
        validator=deep_mapping(key_validator=instance_of(str), value_validator=instance_of(Translation)),
    )

    def to_dict(self) -> Dict:
        """ Plain data version of the record, e.g. for serializing to JSON """
        return {
            'description': self.description,
            'next_steps': self.next_steps,
            'next_user_action': self.next_user_action,
            'category': self.category.value,
            'translations': {locale: asdict(translation) for locale, translation in self.translations.items()},
        }


@frozen
class DeclineCodeResult:
    """
    Result of a decline description lookup.

    doc_version is always set. code is the DeclineCodeInfo, or an empty dict when the code was missing or unknown.
    """
    doc_version: str = field(validator=[instance_of(str), min_len(1)])
    code: Union[DeclineCodeInfo, Dict] = field(validator=instance_of((DeclineCodeInfo, dict)))

    @property
    def is_empty(self) -> bool:
        return not isinstance(self.code, DeclineCodeInfo)
