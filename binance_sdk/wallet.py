"""Wallet endpoints: balances, deposit/withdraw history, snapshots, transfers."""

from .base import EndpointGroup
from .types import HTTPMethod, ParamValue

GET = HTTPMethod.GET
POST = HTTPMethod.POST


class WalletAPI(EndpointGroup):
    """Wallet endpoints."""

    def balance(self, **kwargs: ParamValue) -> bytes:
        """
        Balance of every wallet of the user.

        GET /sapi/v1/asset/wallet/balance

        Args:
            **kwargs: quoteAsset (valuation currency, default BTC), recvWindow
        """
        return self._send(GET, "/sapi/v1/asset/wallet/balance", kwargs)

    def user_asset(self, **kwargs: ParamValue) -> bytes:
        """
        Positive user assets.

        POST /sapi/v3/asset/getUserAsset

        Args:
            **kwargs: asset (all positive assets when omitted),
                needBtcValuation, recvWindow
        """
        return self._send(POST, "/sapi/v3/asset/getUserAsset", kwargs)

    def deposit_history(self, **kwargs: ParamValue) -> bytes:
        """
        Deposit history.

        GET /sapi/v1/capital/deposit/hisrec

        Args:
            **kwargs: coin, status (0 pending, 6 credited, 1 success),
                startTime, endTime, offset, limit (default 1000), recvWindow
        """
        return self._send(GET, "/sapi/v1/capital/deposit/hisrec", kwargs)

    def withdrawal_history(self, **kwargs: ParamValue) -> bytes:
        """Withdrawal history. GET /sapi/v1/capital/withdraw/history"""
        return self._send(GET, "/sapi/v1/capital/withdraw/history", kwargs)

    def my_trades(self, symbol: str, **kwargs: ParamValue) -> bytes:
        """
        Trades of the account for one symbol.

        GET /api/v3/myTrades

        Args:
            symbol: Trading pair, e.g. "BTCUSDT"
            **kwargs: startTime, endTime, orderId, fromId, limit (default 500,
                max 1000), recvWindow
        """
        return self._send(GET, "/api/v3/myTrades", kwargs, {"symbol": symbol})

    def universal_transfer_history(self, transfer_type: str, **kwargs: ParamValue) -> bytes:
        """
        User universal transfer history.

        GET /sapi/v1/asset/transfer

        Args:
            transfer_type: Transfer type such as MAIN_UMFUTURE or MAIN_MARGIN
            **kwargs: startTime, endTime, current, size (default 10, max 100),
                recvWindow
        """
        return self._send(GET, "/sapi/v1/asset/transfer", kwargs, {"type": transfer_type})

    def sub_account_transfer_history(self, **kwargs: ParamValue) -> bytes:
        """Transfer history seen from a sub-account. GET /sapi/v1/sub-account/transfer/subUserHistory"""
        return self._send(GET, "/sapi/v1/sub-account/transfer/subUserHistory", kwargs)

    def account_snapshot(self, account_type: str, **kwargs: ParamValue) -> bytes:
        """
        Daily account snapshot.

        GET /sapi/v1/accountSnapshot

        Args:
            account_type: SPOT, MARGIN or FUTURES
            **kwargs: startTime, endTime, limit (default 7, max 30), recvWindow
        """
        return self._send(GET, "/sapi/v1/accountSnapshot", kwargs, {"type": account_type})

    def master_sub_account_transfer_history(self, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/sub-account/universalTransfer"""
        return self._send(GET, "/sapi/v1/sub-account/universalTransfer", kwargs)

    def master_sub_account_list(self, **kwargs: ParamValue) -> bytes:
        """GET /sapi/v1/sub-account/list"""
        return self._send(GET, "/sapi/v1/sub-account/list", kwargs)
