from showcase_scraper.showcase.schemas import Link, ShowcaseRecord


class ShowcaseAggregator:
    """
    Groups links per author.

    An author's bucket is created when their first link is seen and keeps that
    position, and links are appended in the order they are added, so an author
    posting in several comments ends up with a single record. Authors who never
    posted a link get no bucket and therefore no record.
    """

    def __init__(self, prior: list[ShowcaseRecord] | None = None):
        self.authors: list[str] = []
        self.links_by_author: dict[str, list[Link]] = {}

        # Seed links are copied so enrichment never touches the caller's records
        for record in prior or []:
            self.add(record.author, [link.model_copy(deep=True) for link in record.links])

    def add(self, author: str, links: list[Link]) -> None:
        for link in links:
            if author not in self.links_by_author:
                self.authors.append(author)
                self.links_by_author[author] = []
            self.links_by_author[author].append(link)

    def records(self) -> list[ShowcaseRecord]:
        return [
            ShowcaseRecord(author=author, links=self.links_by_author[author])
            for author in self.authors
        ]


def aggregate_showcases(
    comments: list[tuple[str, list[Link]]],
    prior: list[ShowcaseRecord] | None = None,
) -> list[ShowcaseRecord]:
    aggregator = ShowcaseAggregator(prior)
    for author, links in comments:
        aggregator.add(author, links)
    return aggregator.records()
