import logging
from pathlib import Path

from showcase_scraper.common.github_client import GitHubGraphQLClient
from showcase_scraper.showcase.aggregator import ShowcaseAggregator
from showcase_scraper.showcase.enricher import RepositoryEnricher
from showcase_scraper.showcase.fetcher import DiscussionFetcher
from showcase_scraper.showcase.links import classify_link, extract_links
from showcase_scraper.showcase.schemas import Comment, Link, ShowcaseRecord
from showcase_scraper.showcase.writer import ShowcaseWriter

logger = logging.getLogger(__name__)


class ShowcaseScraper:
    def __init__(
        self,
        organization: str,
        repository: str,
        discussion_number: int,
        prior_showcases: list[ShowcaseRecord] | None = None,
        *,
        github_client: GitHubGraphQLClient,
        content_dir: str | Path,
        after_cursor: str | None = None,
        page_size: int = 100,
    ):
        self.organization = organization
        self.repository = repository
        self.discussion_number = discussion_number
        self.prior_showcases = prior_showcases or []
        self.after_cursor = after_cursor

        self.fetcher = DiscussionFetcher(github_client=github_client, page_size=page_size)
        self.enricher = RepositoryEnricher(fetcher=self.fetcher)
        self.writer = ShowcaseWriter(content_dir)

    def get_comment_links(self, comment: Comment) -> list[Link]:
        return [
            Link(url=url, type=classify_link(url))
            for url in extract_links(comment.body_html)
        ]

    async def run(self) -> list[ShowcaseRecord]:
        comments = await self.fetcher.fetch_comments(
            self.organization,
            self.repository,
            self.discussion_number,
            after=self.after_cursor,
        )

        aggregator = ShowcaseAggregator(self.prior_showcases)
        for comment in comments:
            aggregator.add(comment.author, self.get_comment_links(comment))
        showcases = aggregator.records()

        logger.info(f"Found {len(showcases)} showcases in {len(comments)} comments")

        showcases = await self.enricher.enrich(showcases)

        await self.writer.save(showcases)

        return showcases
