import argparse
import asyncio
import logging
import sys

from showcase_scraper.common.exceptions import ConfigurationError, ShowcaseException
from showcase_scraper.common.github_client import GitHubGraphQLClient
from showcase_scraper.config import Settings, get_settings
from showcase_scraper.showcase.schemas import ShowcaseRecord
from showcase_scraper.showcase.service import ShowcaseScraper

logger = logging.getLogger(__name__)


def parse_args(settings: Settings, argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Collect showcase links posted in a GitHub Discussion."
    )
    parser.add_argument("--organization", default=settings.SHOWCASE_ORGANIZATION)
    parser.add_argument("--repository", default=settings.SHOWCASE_REPOSITORY)
    parser.add_argument(
        "--discussion-number", type=int, default=settings.SHOWCASE_DISCUSSION_NUMBER
    )
    parser.add_argument("--content-dir", default=settings.SHOWCASE_CONTENT_DIR)
    parser.add_argument(
        "--after", default=None, help="Comments cursor to resume pagination from."
    )
    return parser.parse_args(argv)


async def scrape(settings: Settings, args: argparse.Namespace) -> list[ShowcaseRecord]:
    if args.discussion_number is None:
        raise ConfigurationError("SHOWCASE_DISCUSSION_NUMBER is required")

    async with GitHubGraphQLClient(
        concurrent_requests=settings.MAX_CONCURRENT_REQUESTS,
        user_agent=settings.USER_AGENT,
        github_token=settings.GITHUB_TOKEN,
        graphql_url=settings.GITHUB_GRAPHQL_URL,
    ) as client:
        scraper = ShowcaseScraper(
            args.organization,
            args.repository,
            args.discussion_number,
            github_client=client,
            content_dir=args.content_dir,
            after_cursor=args.after,
            page_size=settings.COMMENTS_PAGE_SIZE,
        )
        return await scraper.run()


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
    )

    args = parse_args(settings, argv)

    try:
        showcases = asyncio.run(scrape(settings, args))
    except ShowcaseException as e:
        logger.error(f"Failed to scrape showcases: {e}")
        return 1

    logger.info(f"Scraped {len(showcases)} showcases")
    return 0


if __name__ == "__main__":
    sys.exit(main())
