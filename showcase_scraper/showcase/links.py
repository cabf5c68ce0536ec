from dataclasses import dataclass
from urllib.parse import urlparse
from bs4 import BeautifulSoup

from showcase_scraper.showcase.schemas import LinkType

GITHUB_HOSTS = {"github.com", "www.github.com"}


@dataclass(frozen=True)
class GitHubUserUrl:
    login: str


@dataclass(frozen=True)
class GitHubRepositoryUrl:
    owner: str
    name: str


@dataclass(frozen=True)
class UnknownUrl:
    pass


GitHubUrl = GitHubUserUrl | GitHubRepositoryUrl | UnknownUrl


def parse_github_url(url: str) -> GitHubUrl:
    """
    Resolve a URL to the GitHub resource it points at.

    `https://github.com/<login>` is a user, `https://github.com/<owner>/<name>[/...]`
    is a repository, anything else (other hosts, bare host, unparseable input) is
    unknown.
    """
    try:
        parsed = urlparse(url.strip())
        host = (parsed.hostname or "").lower()
    except ValueError:
        return UnknownUrl()

    if host not in GITHUB_HOSTS:
        return UnknownUrl()

    segments = [segment for segment in parsed.path.split("/") if segment]

    if len(segments) == 1:
        return GitHubUserUrl(login=segments[0])

    if len(segments) >= 2:
        owner, name = segments[0], segments[1]
        if name.endswith(".git"):
            name = name[: -len(".git")]
        if owner and name:
            return GitHubRepositoryUrl(owner=owner, name=name)

    return UnknownUrl()


def classify_link(url: str) -> LinkType:
    github_url = parse_github_url(url)
    if isinstance(github_url, GitHubUserUrl):
        return LinkType.GITHUB_USER
    if isinstance(github_url, GitHubRepositoryUrl):
        return LinkType.GITHUB_REPO
    return LinkType.UNKNOWN


def extract_links(markup: str) -> list[str]:
    soup = BeautifulSoup(markup, "html.parser")
    return [
        str(anchor["href"])
        for anchor in soup.find_all("a", href=True)
        if str(anchor["href"]).strip()
    ]
