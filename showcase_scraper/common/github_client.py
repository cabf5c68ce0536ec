import asyncio
import logging
import time
from types import TracebackType
from typing import Any, Type
from aiohttp import ClientError, ClientSession

from showcase_scraper.common.exceptions import ConfigurationError, TransportError


logger = logging.getLogger(__name__)


class GitHubGraphQLClient:
    def __init__(
        self,
        *,
        concurrent_requests: int,
        user_agent: str,
        github_token: str | None,
        graphql_url: str = "https://api.github.com/graphql",
    ):
        if not github_token:
            raise ConfigurationError("GITHUB_TOKEN is required to access GitHub API")

        self.graphql_url = graphql_url
        self.session: ClientSession = ClientSession(
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent,
                "Authorization": f"Bearer {github_token}",
            }
        )
        self.semaphore = asyncio.Semaphore(concurrent_requests)
        self.rate_limit_event = asyncio.Event()
        self.rate_limit_event.set()

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        if self.session:
            await self.session.close()

    def get_rate_limit_wait(
        self, headers: Any, retry_count: int, retry_backoff: float
    ) -> float:
        retry_after = headers.get("Retry-After")
        rate_limit_remaining = headers.get("X-RateLimit-Remaining")
        rate_limit_reset = headers.get("X-RateLimit-Reset")
        if retry_after:
            return int(retry_after)
        if rate_limit_remaining == "0" and rate_limit_reset:
            # Reset time may already have passed
            return max(int(float(rate_limit_reset)) - int(time.time()), 0)
        return retry_backoff * (2**retry_count)

    async def query(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        max_attempts: int = 5,
        retry_backoff: float = 60,
    ) -> dict[str, Any]:
        payload = {"query": query, "variables": variables or {}}
        retry_count = 0
        while retry_count < max_attempts:
            await self.rate_limit_event.wait()  # Wait until rate limit is lifted
            async with self.semaphore:
                try:
                    async with self.session.post(
                        self.graphql_url, json=payload
                    ) as response:
                        if response.status in (429, 403):
                            self.rate_limit_event.clear()  # Prevent other queries
                            wait_time = self.get_rate_limit_wait(
                                response.headers, retry_count, retry_backoff
                            )
                            logger.warning(
                                f"Rate limit exceeded. Waiting for {wait_time} seconds."
                            )
                            await asyncio.sleep(wait_time)
                            self.rate_limit_event.set()
                            retry_count += 1
                            continue
                        elif response.status == 401:
                            raise TransportError(
                                f"GITHUB_TOKEN is not authorized to access {self.graphql_url}"
                            )
                        response.raise_for_status()
                        body = await response.json()
                except TransportError as e:
                    raise e
                except ClientError:
                    logger.exception("GraphQL request failed")
                    retry_count += 1
                    wait_time = retry_backoff * (2**retry_count)
                    logger.warning(f"Retrying in {wait_time} seconds...")
                    await asyncio.sleep(wait_time)
                    continue
                except Exception as e:
                    logger.exception("Unexpected error")
                    raise TransportError(
                        f"Unexpected error when querying {self.graphql_url}"
                    ) from e

            errors = body.get("errors")
            if errors:
                messages = "; ".join(error.get("message", "") for error in errors)
                raise TransportError(f"GraphQL query failed: {messages}", errors)

            data = body.get("data")
            if data is None:
                raise TransportError("GraphQL response did not contain any data")
            return data

        logger.error(
            f"Failed to query {self.graphql_url} after {max_attempts} attempts."
        )
        raise TransportError(
            f"Failed to query {self.graphql_url} after {max_attempts} attempts"
        )
