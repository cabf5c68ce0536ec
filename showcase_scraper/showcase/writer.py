import asyncio
import logging
import shutil
from pathlib import Path

from showcase_scraper.common.exceptions import PersistenceError
from showcase_scraper.showcase.schemas import ShowcaseRecord

logger = logging.getLogger(__name__)


class ShowcaseWriter:
    def __init__(self, content_dir: str | Path):
        self.content_dir = Path(content_dir)

    def get_showcase_path(self, showcase: ShowcaseRecord) -> Path:
        return self.content_dir / f"{showcase.author}.json"

    async def clear(self) -> None:
        # Removing everything first drops files of deleted or edited comments
        try:
            await asyncio.to_thread(shutil.rmtree, self.content_dir)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise PersistenceError(
                str(self.content_dir), "Failed to remove showcase directory"
            ) from e

        try:
            await asyncio.to_thread(self.content_dir.mkdir, parents=True)
        except OSError as e:
            raise PersistenceError(
                str(self.content_dir), "Failed to create showcase directory"
            ) from e

    async def write_showcase(self, showcase: ShowcaseRecord) -> Path:
        path = self.get_showcase_path(showcase)
        try:
            await asyncio.to_thread(path.write_text, showcase.to_json(), encoding="utf8")
        except OSError as e:
            raise PersistenceError(str(path), "Failed to write showcase") from e
        return path

    async def save(self, showcases: list[ShowcaseRecord]) -> None:
        await self.clear()

        for showcase in showcases:
            await self.write_showcase(showcase)

        logger.info(f"Saved {len(showcases)} showcases to {self.content_dir}")
