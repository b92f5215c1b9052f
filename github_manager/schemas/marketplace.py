"""Pydantic models for GitHub Marketplace listing plans and purchases."""

from enum import Enum
from typing import Self

from github_manager.mapping.fields import JsonObject
from github_manager.schemas.base import BaseResponseDetails, GitHubResponse


class PriceModel(str, Enum):
    """Enum for the pricing models of a Marketplace plan."""

    FREE = "FREE"
    FLAT_RATE = "FLAT_RATE"
    PER_UNIT = "PER_UNIT"


class Plan(BaseResponseDetails):
    """Pydantic model for a Marketplace listing plan."""

    accounts_url: str = ""
    number: int = 0
    description: str = ""
    monthly_price_in_cents: float = 0.0
    yearly_price_in_cents: float = 0.0
    price_model: PriceModel = PriceModel.FREE
    has_free_trial: bool = False
    unit_name: str = ""
    state: str = ""
    bullets: tuple[str, ...] = ()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            **cls._base_details(fields),
            accounts_url=fields.get_str("accounts_url"),
            number=fields.get_int("number"),
            description=fields.get_str("description"),
            monthly_price_in_cents=fields.get_float("monthly_price_in_cents"),
            yearly_price_in_cents=fields.get_float("yearly_price_in_cents"),
            price_model=fields.get_enum("price_model", PriceModel, PriceModel.FREE),
            has_free_trial=fields.get_bool("has_free_trial"),
            unit_name=fields.get_str("unit_name"),
            state=fields.get_str("state"),
            bullets=tuple(fields.get_strings("bullets")),
        )


class MarketplacePurchase(GitHubResponse):
    """Pydantic model for an account's purchase of a Marketplace plan."""

    billing_cycle: str = ""
    next_billing_date: str = ""
    is_installed: bool = False
    unit_count: int = 0
    on_free_trial: bool = False
    free_trial_ends_on: str = ""
    updated_at: str = ""
    plan: Plan = Plan()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            billing_cycle=fields.get_str("billing_cycle"),
            next_billing_date=fields.get_str("next_billing_date"),
            is_installed=fields.get_bool("is_installed"),
            unit_count=fields.get_int("unit_count"),
            on_free_trial=fields.get_bool("on_free_trial"),
            free_trial_ends_on=fields.get_str("free_trial_ends_on"),
            updated_at=fields.get_str("updated_at"),
            plan=Plan.from_json(fields.get_object("plan")),
        )


class PendingChange(GitHubResponse):
    """A plan change scheduled for the next billing cycle."""

    id: int = 0
    effective_date: str = ""
    unit_count: int = 0
    plan: Plan = Plan()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        return cls(
            id=fields.get_int("id"),
            effective_date=fields.get_str("effective_date"),
            unit_count=fields.get_int("unit_count"),
            plan=Plan.from_json(fields.get_object("plan")),
        )


class SubscriptionPlan(GitHubResponse):
    """Pydantic model for an account subscribed to a Marketplace listing."""

    url: str = ""
    type: str = ""
    id: int = 0
    login: str = ""
    organization_billing_email: str = ""
    email: str = ""
    marketplace_pending_change: PendingChange | None = None
    marketplace_purchase: MarketplacePurchase = MarketplacePurchase()

    @classmethod
    def _from_fields(cls, fields: JsonObject) -> Self:
        pending_change = fields.get_optional_object("marketplace_pending_change")
        return cls(
            url=fields.get_str("url"),
            type=fields.get_str("type"),
            id=fields.get_int("id"),
            login=fields.get_str("login"),
            organization_billing_email=fields.get_str("organization_billing_email"),
            email=fields.get_str("email"),
            marketplace_pending_change=PendingChange.from_json(pending_change) if pending_change is not None else None,
            marketplace_purchase=MarketplacePurchase.from_json(fields.get_object("marketplace_purchase")),
        )
