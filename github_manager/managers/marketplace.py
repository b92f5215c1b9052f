"""Manager for GitHub Marketplace listing plans and subscriptions."""

from typing import Any

from github_manager.github.manager import GitHubManager
from github_manager.mapping.formats import ReturnFormat
from github_manager.schemas.marketplace import MarketplacePurchase, Plan, SubscriptionPlan
from github_manager.utils.github import resolve_identifier


class GitHubMarketplaceManager(GitHubManager):
    """Reads the plans of a Marketplace listing and the accounts subscribed to them.

    Every listing endpoint has a stubbed counterpart serving fake data, which
    apps use while their listing is being developed.
    """

    @staticmethod
    def _listing_path(stubbed: bool) -> str:
        return "/marketplace_listing/stubbed" if stubbed else "/marketplace_listing"

    def get_subscription_plan(
        self,
        account_id: int | str,
        stubbed: bool = False,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> SubscriptionPlan | dict[str, Any] | str:
        """Get the plan an account is subscribed to."""
        path = f"{self._listing_path(stubbed)}/accounts/{resolve_identifier(account_id)}"
        return self._fetch("GET", path, SubscriptionPlan.from_json, return_format)

    def list_plans(
        self,
        *,
        per_page: int | None = None,
        page: int | None = None,
        stubbed: bool = False,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Plan] | list[Any] | str:
        """List the plans of the app's Marketplace listing."""
        params = self._omit_null_parameters(per_page=per_page, page=page)
        path = f"{self._listing_path(stubbed)}/plans"
        return self._fetch_list("GET", path, Plan.from_json, return_format, params=params)

    def list_accounts_for_plan(
        self,
        plan: Plan | int | str,
        *,
        sort: str | None = None,
        direction: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
        stubbed: bool = False,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[SubscriptionPlan] | list[Any] | str:
        """List the accounts that have purchased a plan."""
        params = self._omit_null_parameters(sort=sort, direction=direction, per_page=per_page, page=page)
        path = f"{self._listing_path(stubbed)}/plans/{resolve_identifier(plan)}/accounts"
        return self._fetch_list("GET", path, SubscriptionPlan.from_json, return_format, params=params)

    def list_user_subscriptions(
        self,
        *,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[MarketplacePurchase] | list[Any] | str:
        """List the Marketplace purchases of the authenticated user."""
        params = self._omit_null_parameters(per_page=per_page, page=page)
        return self._fetch_list("GET", "/user/marketplace_purchases", MarketplacePurchase.from_json, return_format, params=params)
