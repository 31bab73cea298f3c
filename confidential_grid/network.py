"""
Network Client - Talks to a Confidential Grid server over HTTP
"""
from typing import List, Optional

import httpx

from confidential_grid.config import NETWORK_CONFIG


class GameNetworkClient:
    """Async client for one identity"""

    def __init__(
        self,
        identity: str,
        address: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.identity = identity
        self.address = (address or NETWORK_CONFIG["server_address"]).rstrip("/")
        self.timeout = timeout or NETWORK_CONFIG["connection_timeout"]
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.address,
            timeout=self.timeout,
            transport=self.transport,
            headers={"X-Identity": self.identity},
        )

    async def _post(self, path: str, payload: dict = None) -> dict:
        try:
            async with self._client() as client:
                response = await client.post(path, json=payload or {})
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            print(f"[Client] Error calling {path} as {self.identity}: {e}")
            raise

    async def _get(self, path: str) -> dict:
        try:
            async with self._client() as client:
                response = await client.get(path)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            print(f"[Client] Error calling {path} as {self.identity}: {e}")
            raise

    # ========================================================================
    # Mutations
    # ========================================================================

    async def join(self) -> dict:
        return await self._post("/join")

    async def encrypt_input(self, value: int) -> str:
        """Encrypt a euint8 bound to this identity; returns its handle"""
        data = await self._post("/encrypt_input", {"value": value})
        return data["handle"]

    async def place_building(self, position: int, building_type: int) -> dict:
        """Encrypt the building type, then submit the placement"""
        handle = await self.encrypt_input(building_type)
        return await self._post(
            "/place_building", {"position": position, "handle": handle}
        )

    async def user_decrypt(self, handle: str) -> int:
        data = await self._post("/user_decrypt", {"handle": handle})
        return data["value"]

    # ========================================================================
    # Reads
    # ========================================================================

    async def has_joined(self, identity: Optional[str] = None) -> bool:
        data = await self._get(f"/joined/{identity or self.identity}")
        return data["joined"]

    async def get_balance_handle(self) -> str:
        return (await self._get(f"/balance/{self.identity}"))["handle"]

    async def get_tile_handle(self, position: int) -> str:
        return (await self._get(f"/tile/{self.identity}/{position}"))["handle"]

    async def get_board_handles(self) -> List[str]:
        data = await self._get(f"/board/{self.identity}")
        return [tile["handle"] for tile in data["tiles"]]

    async def get_status_handle(self) -> str:
        return (await self._get(f"/status/{self.identity}"))["handle"]

    # ========================================================================
    # Decrypted views
    # ========================================================================

    async def decrypt_balance(self) -> int:
        return await self.user_decrypt(await self.get_balance_handle())

    async def decrypt_tile(self, position: int) -> int:
        return await self.user_decrypt(await self.get_tile_handle(position))

    async def decrypt_board(self) -> List[int]:
        return [await self.user_decrypt(h) for h in await self.get_board_handles()]

    async def decrypt_status(self) -> int:
        return await self.user_decrypt(await self.get_status_handle())
