"""Message type indicators of ISO 8583:1987."""

from __future__ import annotations

from enum import Enum


class MessageTypeIndicator(str, Enum):
    """Four-digit code that states the overall function of a message."""

    AUTHORIZATION_REQUEST = "0100"
    AUTHORIZATION_RESPONSE = "0110"
    AUTHORIZATION_ADVICE = "0120"
    AUTHORIZATION_ADVICE_REPEAT = "0121"
    ISSUER_RESPONSE_TO_AUTHORIZATION_ADVICE = "0130"
    AUTHORIZATION_POSITIVE_ACKNOWLEDGEMENT = "0180"
    AUTHORIZATION_NEGATIVE_ACKNOWLEDGEMENT = "0190"
    ACQUIRER_FINANCIAL_REQUEST = "0200"
    ISSUER_RESPONSE_TO_FINANCIAL_REQUEST = "0210"
    ACQUIRER_FINANCIAL_ADVICE = "0220"
    ACQUIRER_FINANCIAL_ADVICE_REPEAT = "0221"
    ISSUER_RESPONSE_TO_FINANCIAL_ADVICE = "0230"
    BATCH_UPLOAD = "0320"
    BATCH_UPLOAD_RESPONSE = "0330"
    ACQUIRER_REVERSAL_REQUEST = "0400"
    ACQUIRER_REVERSAL_RESPONSE = "0410"
    ACQUIRER_REVERSAL_ADVICE = "0420"
    ACQUIRER_REVERSAL_ADVICE_RESPONSE = "0430"
    BATCH_SETTLEMENT_RESPONSE = "0510"
    ADMINISTRATIVE_REQUEST = "0600"
    ADMINISTRATIVE_RESPONSE = "0610"
    ADMINISTRATIVE_ADVICE = "0620"
    ADMINISTRATIVE_ADVICE_RESPONSE = "0630"
    NETWORK_MANAGEMENT_REQUEST = "0800"
    NETWORK_MANAGEMENT_RESPONSE = "0810"
    NETWORK_MANAGEMENT_ADVICE = "0820"

    def __str__(self) -> str:
        return self.value