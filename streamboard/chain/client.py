"""Chain read/write client."""

from __future__ import annotations

from typing import Any, Dict, Optional

from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.middleware import SignAndSendRawMiddlewareBuilder


class ChainClient:
    """Balance lookups, receipt waits and a signing account on one RPC endpoint."""

    def __init__(
        self,
        rpc_url: str,
        private_key: str,
        chain_id: int,
        receipt_timeout: float = 120,
    ) -> None:
        self.rpc_url = rpc_url
        self.chain_id = chain_id
        self.receipt_timeout = receipt_timeout
        self.account = Account.from_key(private_key)

        self.w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self.w3.middleware_onion.inject(
            SignAndSendRawMiddlewareBuilder.build(self.account), layer=0
        )
        self.w3.eth.default_account = self.account.address

    @property
    def address(self) -> str:
        return self.account.address

    def tx_params(self) -> Dict[str, Any]:
        """Base parameters for transactions signed by this client."""

        return {"from": self.address, "chainId": self.chain_id}

    def contract(self, address: str, abi: Any):
        return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    async def get_balance(self, address: Optional[str] = None) -> int:
        """Return the balance in wei of ``address`` (defaults to the signer)."""

        target = Web3.to_checksum_address(address or self.address)
        return await self.w3.eth.get_balance(target)

    async def wait_for_receipt(self, tx_hash: str) -> Any:
        return await self.w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=self.receipt_timeout
        )


__all__ = ["ChainClient"]
