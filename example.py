"""Example usage of the Binance SDK.

Reads BINANCE_API_KEY and BINANCE_SECRET_KEY from the environment or a .env
file in the working directory.
"""

from binance_sdk import APIError, BinanceClient, LogLevel, TransportError, parse_response


def main():
    with BinanceClient.from_env(log_level=LogLevel.DEBUG) as client:
        # ====================================================================
        # Wallet
        # ====================================================================

        try:
            balances = parse_response(client.wallet.balance(quoteAsset="USDT"))
        except APIError as error:
            body = error.error_body()
            print(f"Exchange rejected the request: {body.msg if body else error.text}")
            return
        except TransportError as error:
            print(f"Network problem: {error}")
            return

        for wallet in balances:
            print(f"  - {wallet['walletName']}: {wallet['balance']}")

        # ====================================================================
        # Sub-accounts
        # ====================================================================

        accounts = parse_response(client.sub_account.sub_account_list(page=1, limit=10))
        print(f"\nFound {len(accounts.get('subAccounts', []))} sub-accounts:")
        for account in accounts.get("subAccounts", []):
            print(f"  - {account['email']} (frozen: {account['isFreeze']})")

        # Endpoints without a wrapper go through execute()
        raw = client.execute("GET", "/sapi/v1/capital/config/getall")
        print(f"\nCoin config payload: {len(raw)} bytes")


if __name__ == "__main__":
    main()
