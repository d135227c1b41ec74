"""Task discovery across a ClickUp space's folder/list hierarchy."""

from pydantic import ValidationError

from clickup_migration.clients.clickup_client import ClickUpClient
from clickup_migration.display import logger
from clickup_migration.models import Folder, Task, TaskList
from clickup_migration.models.clickup import ClickUpModel
from clickup_migration.type_definitions import JsonData

# ClickUp returns at most this many tasks per page
FULL_PAGE_SIZE = 100


def is_last_page(batch: list[JsonData], page_size: int = FULL_PAGE_SIZE) -> bool:
    """Return True when a page is short enough to be the final one.

    This is an assumption about upstream paging rather than a documented
    contract: if ClickUp ever returns fewer than ``page_size`` tasks on a
    full page, traversal stops early and under-fetches.
    """
    return len(batch) < page_size


class HierarchyWalker:
    """Enumerates every task in a space: folderless lists first, then folders."""

    def __init__(self, client: ClickUpClient, page_size: int = FULL_PAGE_SIZE) -> None:
        self.client = client
        self.page_size = page_size

    def enumerate_tasks(self, space_id: str) -> list[Task]:
        """Return all tasks found under the space.

        Args:
            space_id: ClickUp space identifier

        Returns:
            Tasks from every folderless list and every list inside a folder

        """
        logger.notice("Getting all tasks in space %s...", space_id)
        all_tasks: list[Task] = []

        folders = self._parse(Folder, self.client.get_folders(space_id), f"space {space_id}")
        folderless_lists = self._parse(TaskList, self.client.get_folderless_lists(space_id), f"space {space_id}")

        for task_list in folderless_lists:
            all_tasks.extend(self.fetch_tasks(task_list.id))

        for folder in folders:
            lists = self._parse(TaskList, self.client.get_lists_in_folder(folder.id), f"folder {folder.id}")
            for task_list in lists:
                all_tasks.extend(self.fetch_tasks(task_list.id))

        logger.info(
            "Found %d tasks in %d folderless lists and %d folders",
            len(all_tasks),
            len(folderless_lists),
            len(folders),
        )
        return all_tasks

    def fetch_tasks(self, list_id: str) -> list[Task]:
        """Fetch every page of tasks from a list.

        Paging stops on the first page that yields no payload, an empty
        batch, or a batch shorter than a full page.
        """
        logger.info("Getting tasks from list %s...", list_id)
        tasks: list[Task] = []
        page = 0

        while True:
            batch = self.client.get_tasks_page(list_id, page)
            if not batch:
                break

            tasks.extend(self._parse(Task, batch, f"list {list_id}"))
            page += 1

            if is_last_page(batch, self.page_size):
                break

        logger.debug("Fetched %d tasks from list %s in %d pages", len(tasks), list_id, page)
        return tasks

    def _parse[M: ClickUpModel](self, model: type[M], items: list[JsonData], source: str) -> list[M]:
        """Validate raw API objects, skipping malformed entries with a warning."""
        parsed: list[M] = []
        for raw in items:
            try:
                parsed.append(model.model_validate(raw))
            except ValidationError as e:
                logger.warning("Skipping malformed %s in %s: %s", model.__name__, source, e)
        return parsed
