"""Sub-account management endpoints (master account only).

Every method returns the raw response body. Optional parameters are passed
as keyword arguments using the exchange's own names (``recvWindow``,
``startTime``, ...); keyword arguments set to None are left out.
"""

from .base import EndpointGroup
from .types import HTTPMethod, ParamValue

GET = HTTPMethod.GET
POST = HTTPMethod.POST
DELETE = HTTPMethod.DELETE


class SubAccountAPI(EndpointGroup):
    """Sub-account endpoints."""

    # ========================================================================
    # Account Management
    # ========================================================================

    def sub_account_create(self, sub_account_string: str, **kwargs: ParamValue) -> bytes:
        """
        Create a virtual sub-account.

        POST /sapi/v1/sub-account/virtualSubAccount

        Args:
            sub_account_string: String used to build the virtual email
            **kwargs: recvWindow
        """
        return self._send(
            POST,
            "/sapi/v1/sub-account/virtualSubAccount",
            kwargs,
            {"subAccountString": sub_account_string},
        )

    def sub_account_list(self, **kwargs: ParamValue) -> bytes:
        """
        Query the sub-account list.

        GET /sapi/v1/sub-account/list

        Args:
            **kwargs: email, isFreeze, page (default 1), limit (default 10,
                max 200), recvWindow
        """
        return self._send(GET, "/sapi/v1/sub-account/list", kwargs)

    def sub_account_status(self, **kwargs: ParamValue) -> bytes:
        """Sub-account status on margin and futures. GET /sapi/v1/sub-account/status"""
        return self._send(GET, "/sapi/v1/sub-account/status", kwargs)

    def sub_account_enable_margin(self, email: str, **kwargs: ParamValue) -> bytes:
        """Enable margin. POST /sapi/v1/sub-account/margin/enable"""
        return self._send(POST, "/sapi/v1/sub-account/margin/enable", kwargs, {"email": email})

    def sub_account_enable_futures(self, email: str, **kwargs: ParamValue) -> bytes:
        """Enable futures. POST /sapi/v1/sub-account/futures/enable"""
        return self._send(POST, "/sapi/v1/sub-account/futures/enable", kwargs, {"email": email})

    def sub_account_enable_leverage_token(
        self, email: str, enable_blvt: bool, **kwargs: ParamValue
    ) -> bytes:
        """
        Enable leverage tokens.

        POST /sapi/v1/sub-account/blvt/enable

        Args:
            email: Sub-account email
            enable_blvt: Only true is accepted by the exchange for now
        """
        return self._send(
            POST,
            "/sapi/v1/sub-account/blvt/enable",
            kwargs,
            {"email": email, "enableBlvt": enable_blvt},
        )

    def enable_options_for_sub_account(self, email: str, **kwargs: ParamValue) -> bytes:
        """Enable options. POST /sapi/v1/sub-account/eoptions/enable"""
        return self._send(POST, "/sapi/v1/sub-account/eoptions/enable", kwargs, {"email": email})

    def query_sub_account_transaction_statistics(self, email: str, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/sub-account/transaction-statistics"""
        return self._send(
            GET, "/sapi/v1/sub-account/transaction-statistics", kwargs, {"email": email}
        )

    # ========================================================================
    # API Key IP Restrictions
    # ========================================================================

    def sub_account_update_ip_restriction(
        self, email: str, sub_account_api_key: str, status: str, **kwargs: ParamValue
    ) -> bytes:
        """
        Update the IP restriction of a sub-account API key.

        POST /sapi/v2/sub-account/subAccountApi/ipRestriction

        Args:
            email: Sub-account email
            sub_account_api_key: Sub-account API key
            status: "1" for unrestricted, "2" for trusted IPs only
            **kwargs: ipAddress (comma separated), recvWindow
        """
        return self._send(
            POST,
            "/sapi/v2/sub-account/subAccountApi/ipRestriction",
            kwargs,
            {"email": email, "subAccountApiKey": sub_account_api_key, "status": status},
        )

    def sub_account_api_get_ip_restriction(
        self, email: str, sub_account_api_key: str, **kwargs: ParamValue
    ) -> bytes:
        """GET /sapi/v1/sub-account/subAccountApi/ipRestriction"""
        return self._send(
            GET,
            "/sapi/v1/sub-account/subAccountApi/ipRestriction",
            kwargs,
            {"email": email, "subAccountApiKey": sub_account_api_key},
        )

    def sub_account_api_delete_ip(
        self, email: str, sub_account_api_key: str, ip_address: str, **kwargs: ParamValue
    ) -> bytes:
        """
        Delete IPs from a sub-account API key's restriction list.

        DELETE /sapi/v1/sub-account/subAccountApi/ipRestriction/ipList

        Args:
            ip_address: One address or several separated by commas
            **kwargs: thirdPartyName, recvWindow
        """
        return self._send(
            DELETE,
            "/sapi/v1/sub-account/subAccountApi/ipRestriction/ipList",
            kwargs,
            {
                "email": email,
                "subAccountApiKey": sub_account_api_key,
                "ipAddress": ip_address,
            },
        )

    # ========================================================================
    # Assets
    # ========================================================================

    def sub_account_assets(self, email: str, **kwargs: ParamValue) -> bytes:
        """Sub-account assets (v3). GET /sapi/v3/sub-account/assets"""
        return self._send(GET, "/sapi/v3/sub-account/assets", kwargs, {"email": email})

    def query_sub_account_assets(self, email: str, **kwargs: ParamValue) -> bytes:
        """Sub-account assets (v4). GET /sapi/v4/sub-account/assets"""
        return self._send(GET, "/sapi/v4/sub-account/assets", kwargs, {"email": email})

    def sub_account_spot_summary(self, **kwargs: ParamValue) -> bytes:
        """
        BTC valued asset summary of sub-account spot accounts.

        GET /sapi/v1/sub-account/spotSummary

        Args:
            **kwargs: email, page (default 1), size (default 10, max 20),
                recvWindow
        """
        return self._send(GET, "/sapi/v1/sub-account/spotSummary", kwargs)

    def sub_account_deposit_address(self, email: str, coin: str, **kwargs: ParamValue) -> bytes:
        """
        Get a sub-account deposit address.

        GET /sapi/v1/capital/deposit/subAddress

        Args:
            email: Sub-account email
            coin: Coin symbol
            **kwargs: network, recvWindow
        """
        return self._send(
            GET,
            "/sapi/v1/capital/deposit/subAddress",
            kwargs,
            {"email": email, "coin": coin},
        )

    def sub_account_deposit_history(self, email: str, **kwargs: ParamValue) -> bytes:
        """
        Get sub-account deposit history.

        GET /sapi/v1/capital/deposit/subHisrec

        Args:
            email: Sub-account email
            **kwargs: coin, status (0 pending, 6 credited but cannot withdraw,
                1 success), startTime, endTime, limit, offset, txId, recvWindow
        """
        return self._send(GET, "/sapi/v1/capital/deposit/subHisrec", kwargs, {"email": email})

    # ========================================================================
    # Margin
    # ========================================================================

    def sub_account_margin_account(self, email: str, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/sub-account/margin/account"""
        return self._send(GET, "/sapi/v1/sub-account/margin/account", kwargs, {"email": email})

    def sub_account_margin_account_summary(self, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/sub-account/margin/accountSummary"""
        return self._send(GET, "/sapi/v1/sub-account/margin/accountSummary", kwargs)

    def sub_account_margin_transfer(
        self, email: str, asset: str, amount: float, transfer_type: int, **kwargs: ParamValue
    ) -> bytes:
        """
        Transfer between a sub-account's spot and margin accounts.

        POST /sapi/v1/sub-account/margin/transfer

        Args:
            email: Sub-account email
            asset: Asset symbol
            amount: Amount to transfer
            transfer_type: 1 spot to margin, 2 margin to spot
        """
        return self._send(
            POST,
            "/sapi/v1/sub-account/margin/transfer",
            kwargs,
            {"email": email, "asset": asset, "amount": amount, "type": transfer_type},
        )

    # ========================================================================
    # Futures
    # ========================================================================

    def sub_account_futures_transfer(
        self, email: str, asset: str, amount: float, transfer_type: int, **kwargs: ParamValue
    ) -> bytes:
        """
        Transfer between a sub-account's spot and futures accounts.

        POST /sapi/v1/sub-account/futures/transfer

        Args:
            email: Sub-account email
            asset: Asset symbol
            amount: Amount to transfer
            transfer_type: 1 spot to USDT-M, 2 USDT-M to spot, 3 spot to COIN-M,
                4 COIN-M to spot
        """
        return self._send(
            POST,
            "/sapi/v1/sub-account/futures/transfer",
            kwargs,
            {"email": email, "asset": asset, "amount": amount, "type": transfer_type},
        )

    def sub_account_futures_asset_transfer_history(
        self, email: str, futures_type: int, **kwargs: ParamValue
    ) -> bytes:
        """
        Query futures asset transfer history.

        GET /sapi/v1/sub-account/futures/internalTransfer

        Args:
            email: Sub-account email
            futures_type: 1 USDT-margined, 2 coin-margined
            **kwargs: startTime, endTime, page, limit (default 50, max 500),
                recvWindow
        """
        return self._send(
            GET,
            "/sapi/v1/sub-account/futures/internalTransfer",
            kwargs,
            {"email": email, "futuresType": futures_type},
        )

    def sub_account_futures_asset_transfer(
        self,
        from_email: str,
        to_email: str,
        futures_type: int,
        asset: str,
        amount: float,
        **kwargs: ParamValue,
    ) -> bytes:
        """Futures asset transfer between sub-accounts. POST /sapi/v1/sub-account/futures/internalTransfer"""
        return self._send(
            POST,
            "/sapi/v1/sub-account/futures/internalTransfer",
            kwargs,
            {
                "fromEmail": from_email,
                "toEmail": to_email,
                "futuresType": futures_type,
                "asset": asset,
                "amount": amount,
            },
        )

    def sub_account_futures_account(
        self, email: str, futures_type: int, **kwargs: ParamValue
    ) -> bytes:
        """Futures account detail (v2). GET /sapi/v2/sub-account/futures/account"""
        return self._send(
            GET,
            "/sapi/v2/sub-account/futures/account",
            kwargs,
            {"email": email, "futuresType": futures_type},
        )

    def sub_account_futures_account_summary(self, futures_type: int, **kwargs: ParamValue) -> bytes:
        """Futures account summary (v2). GET /sapi/v2/sub-account/futures/accountSummary"""
        return self._send(
            GET,
            "/sapi/v2/sub-account/futures/accountSummary",
            kwargs,
            {"futuresType": futures_type},
        )

    def summary_of_sub_account_futures_account(
        self, futures_type: int, **kwargs: ParamValue
    ) -> bytes:
        """
        Summary of sub-account futures accounts.

        Same endpoint as `sub_account_futures_account_summary`.

        GET /sapi/v2/sub-account/futures/accountSummary

        Args:
            futures_type: 1 USDT-margined, 2 coin-margined
            **kwargs: page (default 1), limit (default 10, max 20), recvWindow
        """
        return self._send(
            GET,
            "/sapi/v2/sub-account/futures/accountSummary",
            kwargs,
            {"futuresType": futures_type},
        )

    def sub_account_futures_position_risk(
        self, email: str, futures_type: int, **kwargs: ParamValue
    ) -> bytes:
        """GET /sapi/v2/sub-account/futures/positionRisk"""
        return self._send(
            GET,
            "/sapi/v2/sub-account/futures/positionRisk",
            kwargs,
            {"email": email, "futuresType": futures_type},
        )

    def futures_position_risk_of_sub_account(self, email: str, **kwargs: ParamValue) -> bytes:
        """USDT-margined position risk (v1). GET /sapi/v1/sub-account/futures/positionRisk"""
        return self._send(
            GET, "/sapi/v1/sub-account/futures/positionRisk", kwargs, {"email": email}
        )

    def detail_on_sub_account_futures_account(self, email: str, **kwargs: ParamValue) -> bytes:
        """USDT-margined futures account detail (v1). GET /sapi/v1/sub-account/futures/account"""
        return self._send(GET, "/sapi/v1/sub-account/futures/account", kwargs, {"email": email})

    # ========================================================================
    # Transfers
    # ========================================================================

    def sub_account_transfer_to_sub(
        self, to_email: str, asset: str, amount: float, **kwargs: ParamValue
    ) -> bytes:
        """Transfer to another sub-account of the same master. POST /sapi/v1/sub-account/transfer/subToSub"""
        return self._send(
            POST,
            "/sapi/v1/sub-account/transfer/subToSub",
            kwargs,
            {"toEmail": to_email, "asset": asset, "amount": amount},
        )

    def sub_account_transfer_to_master(self, asset: str, amount: float, **kwargs: ParamValue) -> bytes:
        """Transfer to the master account. POST /sapi/v1/sub-account/transfer/subToMaster"""
        return self._send(
            POST,
            "/sapi/v1/sub-account/transfer/subToMaster",
            kwargs,
            {"asset": asset, "amount": amount},
        )

    def sub_account_transfer_sub_account_history(self, **kwargs: ParamValue) -> bytes:
        """
        Transfer history of the calling sub-account.

        GET /sapi/v1/sub-account/transfer/subUserHistory

        Args:
            **kwargs: asset, type (1 transfer in, 2 transfer out), startTime,
                endTime, limit (default 500), recvWindow
        """
        return self._send(GET, "/sapi/v1/sub-account/transfer/subUserHistory", kwargs)

    def sub_account_spot_transfer_history(self, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/sub-account/sub/transfer/history"""
        return self._send(GET, "/sapi/v1/sub-account/sub/transfer/history", kwargs)

    def sub_account_universal_transfer(
        self,
        from_account_type: str,
        to_account_type: str,
        asset: str,
        amount: float,
        **kwargs: ParamValue,
    ) -> bytes:
        """
        Universal transfer between master and sub-accounts.

        POST /sapi/v1/sub-account/universalTransfer

        Args:
            from_account_type: SPOT, USDT_FUTURE, COIN_FUTURE, MARGIN or
                ISOLATED_MARGIN
            to_account_type: Same choices as from_account_type
            asset: Asset symbol
            amount: Amount to transfer
            **kwargs: fromEmail, toEmail, clientTranId, symbol (isolated
                margin only), recvWindow
        """
        return self._send(
            POST,
            "/sapi/v1/sub-account/universalTransfer",
            kwargs,
            {
                "fromAccountType": from_account_type,
                "toAccountType": to_account_type,
                "asset": asset,
                "amount": amount,
            },
        )

    def sub_account_universal_transfer_history(self, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/sub-account/universalTransfer"""
        return self._send(GET, "/sapi/v1/sub-account/universalTransfer", kwargs)

    # ========================================================================
    # Managed Sub-accounts
    # ========================================================================

    def managed_sub_account_deposit(
        self, to_email: str, asset: str, amount: float, **kwargs: ParamValue
    ) -> bytes:
        """Deposit assets into a managed sub-account. POST /sapi/v1/managed-subaccount/deposit"""
        return self._send(
            POST,
            "/sapi/v1/managed-subaccount/deposit",
            kwargs,
            {"toEmail": to_email, "asset": asset, "amount": amount},
        )

    def managed_sub_account_assets(self, email: str, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/managed-subaccount/asset"""
        return self._send(GET, "/sapi/v1/managed-subaccount/asset", kwargs, {"email": email})

    def managed_sub_account_withdraw(
        self, from_email: str, asset: str, amount: float, **kwargs: ParamValue
    ) -> bytes:
        """
        Withdraw assets from a managed sub-account.

        POST /sapi/v1/managed-subaccount/withdraw

        Args:
            from_email: Managed sub-account email
            asset: Asset symbol
            amount: Amount to withdraw
            **kwargs: transferDate (withdrawal runs on that UTC date),
                recvWindow
        """
        return self._send(
            POST,
            "/sapi/v1/managed-subaccount/withdraw",
            kwargs,
            {"fromEmail": from_email, "asset": asset, "amount": amount},
        )

    def managed_sub_account_get_snapshot(
        self, email: str, snapshot_type: str, **kwargs: ParamValue
    ) -> bytes:
        """
        Managed sub-account snapshot.

        GET /sapi/v1/managed-subaccount/accountSnapshot

        Args:
            email: Managed sub-account email
            snapshot_type: SPOT, MARGIN (cross) or FUTURES (USDT-margined)
            **kwargs: startTime, endTime, limit (min 7, max 30, default 7),
                recvWindow
        """
        return self._send(
            GET,
            "/sapi/v1/managed-subaccount/accountSnapshot",
            kwargs,
            {"email": email, "type": snapshot_type},
        )

    def managed_sub_account_investor_trans_log(
        self,
        email: str,
        start_time: int,
        end_time: int,
        page: int,
        limit: int,
        **kwargs: ParamValue,
    ) -> bytes:
        """
        Transfer log of a managed sub-account, investor master view.

        GET /sapi/v1/managed-subaccount/queryTransLogForInvestor

        Args:
            **kwargs: transfers (FROM or TO), transferFunctionAccountType
        """
        return self._send(
            GET,
            "/sapi/v1/managed-subaccount/queryTransLogForInvestor",
            kwargs,
            {
                "email": email,
                "startTime": start_time,
                "endTime": end_time,
                "page": page,
                "limit": limit,
            },
        )

    def managed_sub_account_trading_trans_log(
        self,
        email: str,
        start_time: int,
        end_time: int,
        page: int,
        limit: int,
        **kwargs: ParamValue,
    ) -> bytes:
        """Transfer log of a managed sub-account, trading team view. GET /sapi/v1/managed-subaccount/queryTransLogForTradeParent"""
        return self._send(
            GET,
            "/sapi/v1/managed-subaccount/queryTransLogForTradeParent",
            kwargs,
            {
                "email": email,
                "startTime": start_time,
                "endTime": end_time,
                "page": page,
                "limit": limit,
            },
        )

    def managed_sub_account_deposit_address(
        self, email: str, coin: str, **kwargs: ParamValue
    ) -> bytes:
        """GET /sapi/v1/managed-subaccount/deposit/address"""
        return self._send(
            GET,
            "/sapi/v1/managed-subaccount/deposit/address",
            kwargs,
            {"email": email, "coin": coin},
        )

    def query_managed_sub_account_transfer_log(
        self, start_time: int, end_time: int, page: int, limit: int, **kwargs: ParamValue
    ) -> bytes:
        """
        Transfer log of the calling managed sub-account.

        GET /sapi/v1/managed-subaccount/query-trans-log

        Args:
            start_time: UTC timestamp in ms
            end_time: UTC timestamp in ms
            page: Page number, starting at 1
            limit: Default 500, max 1000
            **kwargs: transfers, transferFunctionAccountType, recvWindow
        """
        return self._send(
            GET,
            "/sapi/v1/managed-subaccount/query-trans-log",
            kwargs,
            {"startTime": start_time, "endTime": end_time, "page": page, "limit": limit},
        )

    def query_managed_sub_account_list(self, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/managed-subaccount/info"""
        return self._send(GET, "/sapi/v1/managed-subaccount/info", kwargs)

    def query_managed_sub_account_margin_asset_details(
        self, email: str, **kwargs: ParamValue
    ) -> bytes:
        """GET /sapi/v1/managed-subaccount/marginAsset"""
        return self._send(GET, "/sapi/v1/managed-subaccount/marginAsset", kwargs, {"email": email})

    def query_managed_sub_account_futures_asset_details(
        self, email: str, **kwargs: ParamValue
    ) -> bytes:
        """GET /sapi/v1/managed-subaccount/fetch-future-asset"""
        return self._send(
            GET, "/sapi/v1/managed-subaccount/fetch-future-asset", kwargs, {"email": email}
        )
