"""
Pydantic models for gateway payloads and client settings.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GatewayModel(BaseModel):
    """Base for gateway payloads, which use camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class ErrorPayload(GatewayModel):
    status: int = 0
    code: int = 0
    message: str = ""
    developer_message: str | None = None


class BalanceEnquiryResponse(GatewayModel):
    # Sent by the gateway as numeric strings
    income: float = 0.0
    main: float = 0.0


class UssdTransactionResponse(GatewayModel):
    user_defined_reference: str = ""
    merchant_ref: str = ""
    transaction_ref: str = ""
    ussd_string: str = ""
    amount: float = 0.0
    response_code: str = ""
    transaction_date: int | None = None
    expiry_date: int | None = None
    completion_date: int | None = None
    status: str = ""
    payment_ref: str | None = None
    payer_phone: str | None = None
    payment_bank: str | None = None
    payment_network: str | None = None
    payment_bank_code: str | None = None


class Receipt(GatewayModel):
    amount: float = 0.0
    date: int = 0
    reference: str | None = None
    recipient: str | None = None
    tran_type: str | None = None
    external_reference: str | None = None
    bank: str | None = None
    account: str | None = None
    name: str | None = None
    narration: str | None = None


class WalletTransaction(GatewayModel):
    debit: bool = False
    tran_id: int = 0
    tran_type: str = ""
    description: str | None = None
    short_description: str | None = None
    narration: str | None = None
    long_description: str | None = None
    date: int = 0
    amount: float = 0.0
    receipt: Receipt | None = Field(default=None, alias="reciept")
    balance: float | None = None
    balance2: float | None = None
    logo_id: str | None = None


class FetchTransactionOptions(BaseModel):
    """Filters for the transaction history endpoint."""

    tran_type: str | None = None
    after: int | None = None
    start_date: int | None = None
    end_date: int | None = None

    def to_params(self) -> dict[str, str]:
        """Return the query parameters for the options that are set."""
        params: dict[str, str] = {}
        if self.tran_type is not None:
            params["trantype"] = self.tran_type
        if self.after is not None:
            params["after"] = str(self.after)
        if self.start_date is not None:
            params["start_date"] = str(self.start_date)
        if self.end_date is not None:
            params["end_date"] = str(self.end_date)
        return params


class ClientConfig(BaseModel):
    base_url: str | None = None
    login_path: str | None = None
    log_level: int | None = None
    request_timeout: float | None = None
