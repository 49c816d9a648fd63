"""Request bodies and response envelopes for the Liquidity API.

Python attributes are snake_case; the wire names are camelCase aliases.
Optional response fields default to ``None`` so that "absent" and "zero" stay
distinguishable. Dates are kept as the ISO-8601 strings the API sends, and
money values decode as ``Decimal``.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from common.datetime import DateLike, format_date

T = TypeVar("T")


class LiquidityModel(BaseModel):
    """Base for every payload: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Wire representation with unset optionals left out."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class MessageResponse(LiquidityModel):
    """Acknowledgement with no payload."""

    message: str


class Envelope(LiquidityModel, Generic[T]):
    message: str
    data: Optional[T] = None


class ListEnvelope(LiquidityModel, Generic[T]):
    message: str
    data: Optional[List[T]] = None
    # opaque "last evaluated key" for the next page
    lek: Optional[str] = None


# ---------------------------------------------------------------------------
# Resource shapes
# ---------------------------------------------------------------------------


class IntegratorData(LiquidityModel):
    integrator_id: str


class Card(LiquidityModel):
    """A virtual card as returned by the card endpoints."""

    card_id: Optional[str] = None
    user_id: Optional[str] = None
    expiry: Optional[str] = None
    valid: Optional[str] = None
    cvv2: Optional[str] = None
    card_number: Optional[str] = None
    last4: Optional[str] = None
    tracking_number: Optional[str] = None
    balance: Optional[Decimal] = None
    status: Optional[str] = None
    currency: Optional[str] = None
    card_type: Optional[str] = None
    single_use: Optional[bool] = None
    card_name: Optional[str] = None
    created_at: Optional[str] = None


class Deposit(LiquidityModel):
    deposit_id: Optional[str] = None
    u54_deposit_id: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


class BankAccountDetails(LiquidityModel):
    """Fiat funding instructions attached to a new deposit."""

    account_number: Optional[str] = None
    account_name: Optional[str] = None
    bank_name: Optional[str] = None
    bank_address: Optional[str] = None
    branch_code: Optional[str] = None
    swift_code: Optional[str] = None


class CoinAddress(LiquidityModel):
    address: Optional[str] = None


class PostedDeposit(LiquidityModel):
    """A freshly initiated deposit with the instructions for funding it.

    Only the block matching ``currency`` is populated by the API.
    """

    deposit_id: Optional[str] = None
    u54_deposit_id: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    created_at: Optional[str] = None
    usd: Optional[BankAccountDetails] = None
    btc: Optional[CoinAddress] = None
    eth: Optional[CoinAddress] = None
    busd: Optional[CoinAddress] = None
    usdc: Optional[CoinAddress] = None
    usdt: Optional[CoinAddress] = None


class Transaction(LiquidityModel):
    transaction_id: Optional[str] = None
    debit_id: Optional[str] = None
    debit_currency: Optional[str] = None
    conversion_rate: Optional[Decimal] = None
    credit_currency: Optional[str] = None
    transaction_balance_before: Optional[Decimal] = None
    card_balance_after: Optional[Decimal] = None
    card_id: Optional[str] = None
    type: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    error_description: Optional[str] = None
    created_at: Optional[str] = None
    narrative: Optional[str] = None
    acquiring_institution_code: Optional[str] = None


class Float(LiquidityModel):
    """Currency balance account held by the integrator."""

    float_id: Optional[str] = None
    updated_at: Optional[str] = None
    currency: Optional[str] = None
    balance: Optional[Decimal] = None
    is_default: Optional[bool] = None


class CreatedUser(LiquidityModel):
    user_id: str


class User(LiquidityModel):
    """KYC profile of a card holder."""

    user_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    uid: Optional[str] = None
    kyc_country: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    physical_card_count: Optional[int] = None
    virtual_card_count: Optional[int] = None
    selfie_uploaded: Optional[bool] = None
    id_uploaded: Optional[bool] = None
    ofac_checked: Optional[bool] = None
    ofac_fail: Optional[bool] = None
    active: Optional[bool] = None


class UserDocumentUrls(LiquidityModel):
    """Pre-signed upload URLs for the KYC selfie and ID document."""

    selfie_upload_url: Optional[str] = None
    id_upload_url: Optional[str] = None
    uid: Optional[str] = None


class AddressUpdateResult(LiquidityModel):
    message: Optional[str] = None


# concrete envelopes ------------------------------------------------------

IntegratorResponse = Envelope[IntegratorData]
CardResponse = Envelope[Card]
CardsResponse = ListEnvelope[Card]
DepositResponse = Envelope[Deposit]
PostDepositResponse = Envelope[PostedDeposit]
TransactionResponse = Envelope[Transaction]
TransactionsResponse = ListEnvelope[Transaction]
FloatResponse = Envelope[Float]
FloatsResponse = ListEnvelope[Float]
CreateUserResponse = Envelope[CreatedUser]
UserResponse = Envelope[User]
UpdateUserAddressResponse = Envelope[AddressUpdateResult]
UserDocumentUrlsResponse = Envelope[UserDocumentUrls]


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------


class RegisterIntegratorData(LiquidityModel):
    float_currencies: List[str] = Field(default_factory=list)
    first_name: str
    last_name: str
    country: str
    business_name: str
    registration_number: str
    business_address: str
    domain: str
    email: str
    webhook_url: str
    contact_number: str


class CreateCardData(LiquidityModel):
    user_id: str
    expiry: DateLike
    single_use: bool = False

    @field_serializer("expiry")
    def _expiry(self, value: DateLike) -> str:
        return format_date(value)


class CreateUserData(LiquidityModel):
    first_name: str
    last_name: str
    kyc_country: str
    uid: str
    address: str
    city: str
    postal_code: str


class UpdateUserAddressData(LiquidityModel):
    user_id: str
    kyc_country: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None


class WebhookUpdate(LiquidityModel):
    webhook: str


class BalanceChange(LiquidityModel):
    card_id: str
    amount: float


class CardRef(LiquidityModel):
    card_id: str


class StopCardData(LiquidityModel):
    card_id: str
    reason_id: int


class DepositRequest(LiquidityModel):
    amount: int
    currency: str


class FloatRef(LiquidityModel):
    float_id: str
