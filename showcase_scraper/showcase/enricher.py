import asyncio
import logging

from showcase_scraper.showcase.fetcher import DiscussionFetcher
from showcase_scraper.showcase.links import GitHubRepositoryUrl, parse_github_url
from showcase_scraper.showcase.schemas import Link, LinkType, ShowcaseRecord

logger = logging.getLogger(__name__)


class RepositoryEnricher:
    def __init__(self, *, fetcher: DiscussionFetcher):
        self.fetcher = fetcher

    def get_repository_links(
        self, showcases: list[ShowcaseRecord]
    ) -> list[tuple[Link, GitHubRepositoryUrl]]:
        repository_links: list[tuple[Link, GitHubRepositoryUrl]] = []
        for showcase in showcases:
            for link in showcase.links:
                if link.type != LinkType.GITHUB_REPO:
                    continue
                github_url = parse_github_url(link.url)
                if isinstance(github_url, GitHubRepositoryUrl):
                    repository_links.append((link, github_url))
        return repository_links

    async def fetch_link_stats(self, link: Link, repo: GitHubRepositoryUrl) -> None:
        stats = await self.fetcher.fetch_repository_stats(repo.owner, repo.name)
        # Keep the submitted url in case the repository was renamed or moved
        link.stats = stats.model_copy(update={"url": link.url})

    async def enrich(self, showcases: list[ShowcaseRecord]) -> list[ShowcaseRecord]:
        repository_links = self.get_repository_links(showcases)
        if not repository_links:
            return showcases

        logger.info(f"Fetching stats for {len(repository_links)} GitHub repository links")

        tasks = [
            asyncio.create_task(self.fetch_link_stats(link, repo))
            for link, repo in repository_links
        ]
        try:
            await asyncio.gather(*tasks)
        except Exception:
            # Any failed query aborts the whole enrichment
            for task in tasks:
                task.cancel()
            raise

        return showcases
