import logging
from pathlib import Path
from typing import Optional

from owns.constants import CODEOWNERS_DIRNAMES, CODEOWNERS_FILENAME, GIT_DIRNAME
from owns.errors import NotInRepositoryError, TargetNotFoundError

logger = logging.getLogger(__name__)


class DiscoveryService:
    def find_repo_root(self, path: Path) -> Path:
        start = path if path.is_dir() else path.parent
        for directory in (start, *start.parents):
            if (directory / GIT_DIRNAME).exists():
                logger.debug("Repository root for %s: %s", path, directory)
                return directory
        raise NotInRepositoryError(path)

    def locate_codeowners_in_dir(self, directory: Path) -> Optional[Path]:
        for dirname in CODEOWNERS_DIRNAMES:
            candidate = directory / dirname / CODEOWNERS_FILENAME
            logger.debug("Checking for CODEOWNERS at %s", candidate)
            if candidate.is_file():
                return candidate
        return None

    def find_codeowners_file_for(self, path: Path) -> Optional[Path]:
        target = path.expanduser()
        if not target.exists():
            raise TargetNotFoundError(path)
        target = target.resolve()
        return self.locate_codeowners_in_dir(self.find_repo_root(target))


def find_repo_root(path: Path) -> Path:
    return DiscoveryService().find_repo_root(path)


def locate_codeowners_in_dir(directory: Path) -> Optional[Path]:
    return DiscoveryService().locate_codeowners_in_dir(directory)


def find_codeowners_file_for(path: Path) -> Optional[Path]:
    return DiscoveryService().find_codeowners_file_for(path)
