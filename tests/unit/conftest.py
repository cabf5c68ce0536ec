from typing import Any, AsyncGenerator, Callable

import pytest

from showcase_scraper.common.github_client import GitHubGraphQLClient


@pytest.fixture
async def github_client() -> AsyncGenerator[GitHubGraphQLClient, None]:
    async with GitHubGraphQLClient(
        concurrent_requests=2,
        user_agent="test-agent",
        github_token="test-token",
    ) as client:
        yield client


@pytest.fixture
def comment_node() -> Callable[[str | None, list[str]], dict[str, Any]]:
    def _comment_node(author: str | None, links: list[str]) -> dict[str, Any]:
        return {
            "author": {"login": author} if author else None,
            "bodyHTML": " ".join(f'<a href="{link}">{link}</a>' for link in links),
        }

    return _comment_node


@pytest.fixture
def comments_page() -> Callable[..., dict[str, Any]]:
    def _comments_page(
        nodes: list[dict[str, Any]],
        end_cursor: str | None = "end-cursor",
        has_next_page: bool = False,
    ) -> dict[str, Any]:
        return {
            "repository": {
                "discussion": {
                    "comments": {
                        "pageInfo": {
                            "endCursor": end_cursor,
                            "hasNextPage": has_next_page,
                        },
                        "nodes": nodes,
                    }
                }
            }
        }

    return _comments_page


@pytest.fixture
def repository_data() -> Callable[..., dict[str, Any]]:
    def _repository_data(owner: str, name: str, **overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": name,
            "description": f"The {name} repository",
            "url": f"https://github.com/{owner}/{name}",
            "stargazerCount": 42,
            "forkCount": 7,
            "owner": {
                "login": owner,
                "avatarUrl": f"https://avatars.githubusercontent.com/{owner}",
            },
            "issues": {"totalCount": 3},
            "pullRequests": {"totalCount": 2},
            "discussions": {"totalCount": 1},
            "mentionableUsers": {"totalCount": 12},
        }
        data.update(overrides)
        return {"repository": data}

    return _repository_data
