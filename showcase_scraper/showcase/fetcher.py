import logging
from typing import Any

from showcase_scraper.common.exceptions import TransportError
from showcase_scraper.common.github_client import GitHubGraphQLClient
from showcase_scraper.showcase.queries import (
    DISCUSSION_COMMENTS_QUERY,
    REPOSITORY_STATS_QUERY,
)
from showcase_scraper.showcase.schemas import Comment, DiscussionPage, RepositoryStats

logger = logging.getLogger(__name__)

# Login GitHub shows for comments whose author account was deleted
GHOST_LOGIN = "ghost"


class DiscussionFetcher:
    def __init__(
        self,
        *,
        github_client: GitHubGraphQLClient,
        page_size: int = 100,
    ):
        self.client = github_client
        self.page_size = page_size

    async def fetch_comments_page(
        self,
        organization: str,
        repository: str,
        discussion_number: int,
        after: str | None = None,
    ) -> DiscussionPage:
        data = await self.client.query(
            DISCUSSION_COMMENTS_QUERY,
            {
                "organization": organization,
                "repository": repository,
                "discussionNumber": discussion_number,
                "first": self.page_size,
                "after": after,
            },
        )

        repo = data.get("repository")
        if not repo:
            raise TransportError(f"Repository {organization}/{repository} not found")

        discussion = repo.get("discussion")
        if not discussion:
            raise TransportError(
                f"Discussion #{discussion_number} not found in {organization}/{repository}"
            )

        comments = discussion["comments"]
        page_info = comments["pageInfo"]

        return DiscussionPage(
            comments=[
                Comment(
                    author=(node.get("author") or {}).get("login") or GHOST_LOGIN,
                    body_html=node.get("bodyHTML") or "",
                )
                for node in comments["nodes"]
                if node
            ],
            end_cursor=page_info.get("endCursor"),
            has_next_page=bool(page_info.get("hasNextPage")),
        )

    async def fetch_comments(
        self,
        organization: str,
        repository: str,
        discussion_number: int,
        after: str | None = None,
    ) -> list[Comment]:
        logger.info(
            f"Fetching comments from discussion: {organization}/{repository}#{discussion_number}"
        )

        comments: list[Comment] = []
        cursor = after
        page_count = 0

        while True:
            page = await self.fetch_comments_page(
                organization, repository, discussion_number, after=cursor
            )
            comments.extend(page.comments)
            page_count += 1

            if not page.has_next_page:
                break
            if not page.end_cursor:
                raise TransportError(
                    "Discussion comments page reported more pages without a cursor"
                )
            cursor = page.end_cursor

        logger.info(f"Fetched {len(comments)} comments in {page_count} page(s)")
        return comments

    async def fetch_repository_stats(self, owner: str, name: str) -> RepositoryStats:
        data = await self.client.query(
            REPOSITORY_STATS_QUERY, {"owner": owner, "name": name}
        )

        repo: dict[str, Any] | None = data.get("repository")
        if not repo:
            raise TransportError(f"Repository {owner}/{name} not found")

        owner_data = repo.get("owner") or {}

        return RepositoryStats(
            name=repo["name"],
            owner_login=owner_data.get("login", owner),
            owner_avatar_url=owner_data.get("avatarUrl"),
            description=repo.get("description"),
            url=repo["url"],
            star_count=repo["stargazerCount"],
            fork_count=repo["forkCount"],
            open_issue_count=repo["issues"]["totalCount"],
            open_pull_request_count=repo["pullRequests"]["totalCount"],
            discussion_count=repo["discussions"]["totalCount"],
            mentionable_user_count=repo["mentionableUsers"]["totalCount"],
        )
