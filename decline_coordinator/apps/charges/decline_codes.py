"""
The decline code table.

Transcribed from Stripe's decline code documentation, see https://docs.stripe.com/declines/codes

The table is built once at import and is read-only afterwards, use the functions in api.py to read it.
"""
from types import MappingProxyType

from decline_coordinator.apps.charges.constants import DeclineCategory, DeclineCode, Locale
from decline_coordinator.apps.charges.data import DeclineCodeInfo, Translation

# Revision of the Stripe documentation the table was transcribed from.
DOC_VERSION = '2024-12-18'

_DECLINE_CODES = {
    DeclineCode.APPROVE_WITH_ID: DeclineCodeInfo(
        description='The payment cannot be authorized.',
        next_steps=(
            'The payment should be attempted again. If it still cannot be processed, the customer needs to contact '
            'their card issuer.'
        ),
        next_user_action='Please try again. If it still cannot be processed, the please contact your card issuer.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='支払いは承認できません。',
                next_user_action='もう一度やり直してください。それでも処理できない場合は、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.AUTHENTICATION_REQUIRED: DeclineCodeInfo(
        description='The card was declined as the transaction requires authentication.',
        next_steps=(
            'The customer should try again and authenticate their card when prompted during the transaction. If '
            'the card issuer returns this decline code on an authenticated transaction, the customer needs to '
            'contact their card issuer for more information.'
        ),
        next_user_action=(
            'Please try again and authenticate your card when prompted. If the payment is still declined, please '
            'contact your card issuer.'
        ),
        category=DeclineCategory.SOFT_DECLINE,
    ),
    DeclineCode.CALL_ISSUER: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.CARD_NOT_SUPPORTED: DeclineCodeInfo(
        description='The card does not support this type of purchase.',
        next_steps=(
            'The customer needs to contact their card issuer to make sure their card can be used to make this type '
            'of purchase.'
        ),
        next_user_action=(
            'Your card issuer may not support this type of purchase, please contact your card issuer for more '
            'information.'
        ),
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードはこのタイプの購入をサポートしません。',
                next_user_action='カード発行者はこのタイプの購入をサポートしていない可能性があります。詳細については、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.CARD_VELOCITY_EXCEEDED: DeclineCodeInfo(
        description='The customer has exceeded the balance or credit limit available on their card.',
        next_steps='The customer should contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='このカードの残高またはクレジット制限を超えました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.CURRENCY_NOT_SUPPORTED: DeclineCodeInfo(
        description='The card does not support the specified currency.',
        next_steps=(
            'The customer needs to check with the issuer whether the card can be used for the type of currency '
            'specified.'
        ),
        next_user_action=(
            'Please contact your card issuer to verify this type of currency can be used for this payment.'
        ),
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは指定された通貨をサポートしていません。',
                next_user_action='この支払いにこのタイプの通貨が使用できることを確認するには、カード発行会社に連絡してください。',
            ),
        },
    ),
    DeclineCode.DO_NOT_HONOR: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.DO_NOT_TRY_AGAIN: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer should contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.DUPLICATE_TRANSACTION: DeclineCodeInfo(
        description='A transaction with identical amount and credit card information was submitted very recently.',
        next_steps='Check to see if a recent payment already exists.',
        next_user_action='Check to see if a recent payment already exists.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='ごく最近、同一の金額とクレジットカード情報を使用した取引が送信されました。',
                next_user_action='最近の支払いが既に存在するかどうかを確認してください。',
            ),
        },
    ),
    DeclineCode.EXPIRED_CARD: DeclineCodeInfo(
        description='The card has expired.',
        next_steps='The customer should use another card.',
        next_user_action='Please use another card.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは期限切れです。',
                next_user_action='別のカードを使用してください。',
            ),
        },
    ),
    DeclineCode.FRAUDULENT: DeclineCodeInfo(
        description='The payment has been declined as Stripe suspects it is fraudulent.',
        next_steps=(
            'Do not report more detailed information to your customer. Instead, present as you would the '
            'generic_decline described below.'
        ),
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='不正と思われるため、支払いは拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.GENERIC_DECLINE: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.INCORRECT_CVC: DeclineCodeInfo(
        description='The CVC number is incorrect.',
        next_steps='The customer should try again using the correct CVC.',
        next_user_action=(
            'Please check your card numbers and try again. If it still cannot be processed, the please contact '
            'your card issuer.'
        ),
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='CVC番号が正しくありません。',
                next_user_action='CSC番号を確認してもう一度やり直してください。それでも処理できない場合は、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.INCORRECT_NUMBER: DeclineCodeInfo(
        description='The card number is incorrect.',
        next_steps='The customer should try again using the correct card number.',
        next_user_action=(
            'Please check your card numbers and try again. If it still cannot be processed, the please contact '
            'your card issuer.'
        ),
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カード番号が正しくありません。',
                next_user_action='カード番号を確認してもう一度やり直してください。それでも処理できない場合は、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.INCORRECT_PIN: DeclineCodeInfo(
        description='The PIN entered is incorrect. This decline code only applies to payments made with a card reader.',
        next_steps='The customer should try again using the correct PIN.',
        next_user_action=(
            'Please check your PIN and try again. If it still cannot be processed, the please contact your card '
            'issuer.'
        ),
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='PINコードが正しくありません。',
                next_user_action='PINコードを確認してもう一度やり直してください。それでも処理できない場合は、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.INCORRECT_ZIP: DeclineCodeInfo(
        description='The ZIP/postal code is incorrect.',
        next_steps='The customer should try again using the correct billing ZIP/postal code.',
        next_user_action='Please try again using the correct ZIP/postal code.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='郵便番号が正しくありません。',
                next_user_action='正しい郵便番号を使用してもう一度お試しください。',
            ),
        },
    ),
    DeclineCode.INSUFFICIENT_FUNDS: DeclineCodeInfo(
        description='The card has insufficient funds to complete the purchase.',
        next_steps='The customer should use an alternative payment method.',
        next_user_action='Please try again using an alternative payment method.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードの購入に必要な資金が不足しています。',
                next_user_action='別のお支払い方法を使用してもう一度お試しください。',
            ),
        },
    ),
    DeclineCode.INVALID_ACCOUNT: DeclineCodeInfo(
        description='The card, or account the card is connected to, is invalid.',
        next_steps='The customer needs to contact their card issuer to check that the card is working correctly.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カード、またはカードが接続されているアカウントが無効です。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.INVALID_AMOUNT: DeclineCodeInfo(
        description='The payment amount is invalid, or exceeds the amount that is allowed.',
        next_steps=(
            'If the amount appears to be correct, the customer needs to check with their card issuer that they can '
            'make purchases of that amount.'
        ),
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='支払い金額が無効であるか、許可されている金額を超えています。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.INVALID_CVC: DeclineCodeInfo(
        description='The CVC number is incorrect.',
        next_steps='The customer should try again using the correct CVC.',
        next_user_action='Please try again using the correct CVC.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='CVC番号が正しくありません。',
                next_user_action='正しいCVCを使用してもう一度やり直してください。',
            ),
        },
    ),
    DeclineCode.INVALID_EXPIRY_YEAR: DeclineCodeInfo(
        description='The expiration year invalid.',
        next_steps='The customer should try again using the correct expiration date.',
        next_user_action='Please try again using the correct expiration date.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='有効期限が無効です。',
                next_user_action='正しい有効期限を入力してもう一度お試しください。',
            ),
        },
    ),
    DeclineCode.INVALID_NUMBER: DeclineCodeInfo(
        description='The card number is incorrect.',
        next_steps='The customer should try again using the correct card number.',
        next_user_action='Please try again using the correct card number.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カード番号が正しくありません。',
                next_user_action='正しいカード番号を使用してもう一度やり直してください。',
            ),
        },
    ),
    DeclineCode.INVALID_PIN: DeclineCodeInfo(
        description='The PIN entered is incorrect. This decline code only applies to payments made with a card reader.',
        next_steps='The customer should try again using the correct PIN.',
        next_user_action='Please try again using the correct card PIN.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='PINコードが正しくありません。',
                next_user_action='正しいPINコードを使用してもう一度やり直してください。',
            ),
        },
    ),
    DeclineCode.ISSUER_NOT_AVAILABLE: DeclineCodeInfo(
        description='The card issuer could not be reached, so the payment could not be authorized.',
        next_steps=(
            'The payment should be attempted again. If it still cannot be processed, the customer needs to contact '
            'their card issuer.'
        ),
        next_user_action='Please try again. If it still cannot be processed, the please contact your card issuer.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カード発行者に連絡できなかったため、支払いを承認できませんでした。',
                next_user_action='もう一度やり直してください。それでも処理できない場合は、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.LOST_CARD: DeclineCodeInfo(
        description='The payment has been declined because the card is reported lost.',
        next_steps=(
            'The specific reason for the decline should not be reported to the customer. Instead, it needs to be '
            'presented as a generic decline.'
        ),
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.MERCHANT_BLACKLIST: DeclineCodeInfo(
        description="The payment has been declined because it matches a value on the Stripe user's blocklist.",
        next_steps=(
            'Do not report more detailed information to your customer. Instead, present as you would the '
            'generic_decline described above.'
        ),
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.NEW_ACCOUNT_INFORMATION_AVAILABLE: DeclineCodeInfo(
        description='The card, or account the card is connected to, is invalid.',
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カード、またはカードが接続されているアカウントが無効です。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.NO_ACTION_TAKEN: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer should contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.NOT_PERMITTED: DeclineCodeInfo(
        description='The payment is not permitted.',
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='支払いは許可されていません。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.PICKUP_CARD: DeclineCodeInfo(
        description=(
            'The card cannot be used to make this payment (it is possible it has been reported lost or stolen).'
        ),
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードでこの支払いを行うことはできません（紛失または盗難にあったと報告されている可能性があります）。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.PIN_TRY_EXCEEDED: DeclineCodeInfo(
        description='The allowable number of PIN tries has been exceeded.',
        next_steps='The customer must use another card or method of payment.',
        next_user_action='Please use another card or method of payment.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='PIN試行回数の上限を超えました。',
                next_user_action='別のカードまたはお支払い方法をご利用ください。',
            ),
        },
    ),
    DeclineCode.PROCESSING_ERROR: DeclineCodeInfo(
        description='An error occurred while processing the card.',
        next_steps='The payment should be attempted again. If it still cannot be processed, try again later.',
        next_user_action='Please try again. If it still cannot be processed, the please contact your card issuer.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードの処理中にエラーが発生しました。',
                next_user_action='もう一度やり直してください。それでも処理できない場合は、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.REENTER_TRANSACTION: DeclineCodeInfo(
        description='The payment could not be processed by the issuer for an unknown reason.',
        next_steps=(
            'The payment should be attempted again. If it still cannot be processed, the customer needs to contact '
            'their card issuer.'
        ),
        next_user_action='Please try again. If it still cannot be processed, the please contact your card issuer.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='原因不明のため、発行者が支払いを処理できませんでした。',
                next_user_action='もう一度やり直してください。それでも処理できない場合は、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.RESTRICTED_CARD: DeclineCodeInfo(
        description=(
            'The card cannot be used to make this payment (it is possible it has been reported lost or stolen).'
        ),
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードでこの支払いを行うことはできません（紛失または盗難にあったと報告されている可能性があります）。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.REVOCATION_OF_ALL_AUTHORIZATIONS: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer should contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.REVOCATION_OF_AUTHORIZATION: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer should contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.SECURITY_VIOLATION: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.SERVICE_NOT_ALLOWED: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer should contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.STOLEN_CARD: DeclineCodeInfo(
        description='The payment has been declined because the card is reported stolen.',
        next_steps=(
            'The specific reason for the decline should not be reported to the customer. Instead, it needs to be '
            'presented as a generic decline.'
        ),
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.STOP_PAYMENT_ORDER: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer should contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.TESTMODE_DECLINE: DeclineCodeInfo(
        description='A Stripe test card number was used.',
        next_steps='A genuine card must be used to make a payment.',
        next_user_action='A genuine card must be used to make a payment.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='Stripeテストカード番号を使用しました。',
                next_user_action='支払いには本物のカードを使用する必要があります。',
            ),
        },
    ),
    DeclineCode.TRANSACTION_NOT_ALLOWED: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps='The customer needs to contact their card issuer for more information.',
        next_user_action='Please contact your card issuer for more information.',
        category=DeclineCategory.HARD_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='詳しくはカード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.TRY_AGAIN_LATER: DeclineCodeInfo(
        description='The card has been declined for an unknown reason.',
        next_steps=(
            'Ask the customer to attempt the payment again. If subsequent payments are declined, the customer '
            'should contact their card issuer for more information.'
        ),
        next_user_action='Please try again. If it still cannot be processed, the please contact your card issuer.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='カードは未知の理由で拒否されました。',
                next_user_action='もう一度やり直してください。それでも処理できない場合は、カード発行会社にお問い合わせください。',
            ),
        },
    ),
    DeclineCode.WITHDRAWAL_COUNT_LIMIT_EXCEEDED: DeclineCodeInfo(
        description='The customer has exceeded the balance or credit limit available on their card.',
        next_steps='The customer should use an alternative payment method.',
        next_user_action='Please use another card or contact your card issuer for more information.',
        category=DeclineCategory.SOFT_DECLINE,
        translations={
            Locale.JA: Translation(
                description='このカードの残高またはクレジット制限を超えました。',
                next_user_action='別のカードを使用するか、カード発行会社にお問い合わせください。',
            ),
        },
    ),
}

DECLINE_CODES = MappingProxyType({code.value: info for code, info in _DECLINE_CODES.items()})
