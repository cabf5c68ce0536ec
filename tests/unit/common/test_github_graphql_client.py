import pytest
from aiohttp import ClientError, ClientResponse, ClientSession
from pytest_mock import MockerFixture

from showcase_scraper.common.exceptions import ConfigurationError, TransportError
from showcase_scraper.common.github_client import GitHubGraphQLClient


async def test_github_graphql_client_initialization() -> None:
    client = GitHubGraphQLClient(
        concurrent_requests=2,
        user_agent="test-agent",
        github_token="test-token",
    )
    assert isinstance(client.session, ClientSession)
    assert client.semaphore._value == 2
    assert client.session.headers["Authorization"] == "Bearer test-token"
    assert client.graphql_url == "https://api.github.com/graphql"
    await client.session.close()

    # Test initialization without token
    with pytest.raises(ConfigurationError, match="GITHUB_TOKEN is required"):
        GitHubGraphQLClient(
            concurrent_requests=2,
            user_agent="test-agent",
            github_token=None,
        )


async def test_query_success(
    github_client: GitHubGraphQLClient, mocker: MockerFixture
) -> None:
    mock_response = mocker.Mock(spec=ClientResponse)
    mock_response.status = 200
    mock_response.json.return_value = {"data": {"viewer": {"login": "octocat"}}}
    mock_response.headers = {}

    mock_post = mocker.patch.object(github_client.session, "post")
    mock_post.return_value.__aenter__.return_value = mock_response

    data = await github_client.query("query { viewer { login } }", {"a": 1})

    assert data == {"viewer": {"login": "octocat"}}
    mock_post.assert_called_once_with(
        "https://api.github.com/graphql",
        json={"query": "query { viewer { login } }", "variables": {"a": 1}},
    )


async def test_query_graphql_errors(
    github_client: GitHubGraphQLClient, mocker: MockerFixture
) -> None:
    errors = [{"type": "NOT_FOUND", "message": "Could not resolve to a Repository"}]
    mock_response = mocker.Mock(spec=ClientResponse)
    mock_response.status = 200
    mock_response.json.return_value = {"data": {"repository": None}, "errors": errors}
    mock_response.headers = {}

    mock_post = mocker.patch.object(github_client.session, "post")
    mock_post.return_value.__aenter__.return_value = mock_response

    with pytest.raises(TransportError, match="Could not resolve") as exc_info:
        await github_client.query("query { repository }")

    assert exc_info.value.errors == errors


async def test_query_missing_data(
    github_client: GitHubGraphQLClient, mocker: MockerFixture
) -> None:
    mock_response = mocker.Mock(spec=ClientResponse)
    mock_response.status = 200
    mock_response.json.return_value = {}
    mock_response.headers = {}

    mock_post = mocker.patch.object(github_client.session, "post")
    mock_post.return_value.__aenter__.return_value = mock_response

    with pytest.raises(TransportError, match="did not contain any data"):
        await github_client.query("query { viewer { login } }")


async def test_query_rate_limit(
    github_client: GitHubGraphQLClient, mocker: MockerFixture
) -> None:
    mock_sleep = mocker.patch(
        "showcase_scraper.common.github_client.asyncio.sleep",
        new_callable=mocker.AsyncMock,
    )

    rate_limit_response = mocker.Mock(spec=ClientResponse)
    rate_limit_response.status = 429
    rate_limit_response.headers = {"Retry-After": "1"}

    success_response = mocker.Mock(spec=ClientResponse)
    success_response.status = 200
    success_response.json.return_value = {"data": {"key": "value"}}
    success_response.headers = {"X-RateLimit-Remaining": "100"}

    mock_post = mocker.patch.object(github_client.session, "post")
    mock_post.return_value.__aenter__.side_effect = [
        rate_limit_response,
        success_response,
    ]

    data = await github_client.query("query { key }")

    assert data == {"key": "value"}
    assert mock_post.call_count == 2
    mock_sleep.assert_awaited_once_with(1)
    assert github_client.rate_limit_event.is_set()


async def test_get_rate_limit_wait(github_client: GitHubGraphQLClient) -> None:
    assert github_client.get_rate_limit_wait({"Retry-After": "30"}, 0, 60) == 30
    assert (
        github_client.get_rate_limit_wait(
            {"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "0"}, 0, 60
        )
        == 0
    )
    assert github_client.get_rate_limit_wait({}, 2, 1.5) == 6


async def test_query_401(
    github_client: GitHubGraphQLClient, mocker: MockerFixture
) -> None:
    mock_response = mocker.Mock(spec=ClientResponse)
    mock_response.status = 401

    mock_post = mocker.patch.object(github_client.session, "post")
    mock_post.return_value.__aenter__.return_value = mock_response

    with pytest.raises(TransportError, match="GITHUB_TOKEN is not authorized"):
        await github_client.query("query { viewer { login } }")


async def test_query_client_error(
    github_client: GitHubGraphQLClient, mocker: MockerFixture
) -> None:
    mock_post = mocker.patch.object(github_client.session, "post")
    mock_post.return_value.__aenter__.side_effect = ClientError()

    with pytest.raises(TransportError, match="after 3 attempts"):
        await github_client.query(
            "query { viewer { login } }", max_attempts=3, retry_backoff=0.001
        )

    assert mock_post.call_count == 3


async def test_query_unexpected_error(
    github_client: GitHubGraphQLClient, mocker: MockerFixture
) -> None:
    mock_post = mocker.patch.object(github_client.session, "post")
    mock_post.return_value.__aenter__.side_effect = Exception("Unexpected error")

    with pytest.raises(TransportError, match="Unexpected error"):
        await github_client.query("query { viewer { login } }")
