import asyncio
import logging
from typing import Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from frontend.result import Err, Ok, Result


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class Fetcher:
    """
    Performs one GET against the backend API and turns the outcome
    into a Result: Ok with the parsed body, or Err with a readable message.

    requests is blocking, so the call runs in the loop's default executor.
    No retries and no timeout at this level.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _get(self, path: str) -> requests.Response:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            lambda: self.session.get(self._url(path))
        )

    async def _send(self, path: str) -> Result[requests.Response]:
        try:
            response = await self._get(path)
        except requests.RequestException as e:
            logger.warning("GET %s failed: %s", path, e)
            return Err(f"Error: {e}")

        if not response.ok:
            logger.warning("GET %s returned %s", path, response.status_code)
            return Err(f"Error fetching data: {response.status_code} ({response.reason})")

        return Ok(response)

    async def fetch_json(self, path: str, model: Type[M]) -> Result[M]:
        """
        GET path and validate the JSON body as model.
        """

        sent = await self._send(path)
        if isinstance(sent, Err):
            return sent

        try:
            return Ok(model.model_validate_json(sent.value.content))
        except ValidationError as e:
            logger.warning("GET %s: unexpected body: %s", path, e)
            return Err(f"Error: {e}")

    async def fetch_text(self, path: str) -> Result[str]:
        sent = await self._send(path)
        if isinstance(sent, Err):
            return sent

        return Ok(sent.value.text)

    def close(self) -> None:
        self.session.close()
