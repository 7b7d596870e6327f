"""Controller for one catalog page: load, filter, open the form, save, delete.

Each view owns its state. Responses that arrive after ``unmount()`` (or after
a newer ``load()``) are dropped instead of being written into the view.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple, Union

from app.catalogs.filtering import ALL, RowFilter
from app.catalogs.form import EntityForm
from app.catalogs.repository import CatalogRepository
from app.core.exceptions import ServiceError, ValidationFailure
from app.db.data_service import DataServiceClient

logger = logging.getLogger(__name__)

Confirm = Callable[[str], Union[bool, Awaitable[bool]]]


class CatalogListView:
    def __init__(
        self,
        repository: CatalogRepository,
        client: DataServiceClient,
        option_sources: Optional[Mapping[str, CatalogRepository]] = None,
    ) -> None:
        self.repository = repository
        self.client = client
        self.option_sources = dict(option_sources or {})
        self.rows: List[Dict[str, Any]] = []
        self.options: Dict[str, List[Dict[str, Any]]] = {name: [] for name in self.option_sources}
        self.loading = False
        self.saving = False
        self.deleting = False
        self.search_term = ""
        self.filter_values: Dict[str, str] = {c.key: ALL for c in repository.filter_columns}
        self.error: Optional[str] = None
        self.form = EntityForm(repository)
        self.mounted = False
        self._mount_token = 0
        self._load_token = 0
        self._rows_version = 0
        self._filter = RowFilter(repository.search_fields, repository.filter_columns)

    # ----- derived state -----

    @property
    def modal_open(self) -> bool:
        return self.form.is_open

    @property
    def selected_row_for_edit(self) -> Optional[Mapping[str, Any]]:
        return self.form.editing_row

    @property
    def visible_rows(self) -> List[Mapping[str, Any]]:
        return self._filter(self.rows, self._rows_version, self.search_term, self.filter_values)

    @property
    def filter_computations(self) -> int:
        return self._filter.computations

    # ----- lifecycle -----

    async def mount(self) -> None:
        """Load rows and dropdown sources as independent concurrent requests."""
        self.mounted = True
        self._mount_token += 1
        await asyncio.gather(self.load(), self.load_options())

    def unmount(self) -> None:
        self.mounted = False
        self._mount_token += 1

    def _is_current(self, token: Tuple[int, int]) -> bool:
        return self.mounted and token == (self._mount_token, self._load_token)

    async def load(self) -> None:
        self._load_token += 1
        token = (self._mount_token, self._load_token)
        self.loading = True
        self.error = None
        try:
            rows = await self.repository.fetch_all(self.client)
        except ServiceError as e:
            logger.warning("Loading %s failed: %s", self.repository.plural, e.message)
            if self._is_current(token):
                self.error = e.message
                self.loading = False
            return
        if not self._is_current(token):
            logger.debug("Dropping stale %s load", self.repository.plural)
            return
        self.rows = rows
        self._rows_version += 1
        self.loading = False

    async def load_options(self) -> None:
        if not self.option_sources:
            return
        mount_token = self._mount_token
        names = list(self.option_sources)
        results = await asyncio.gather(
            *(self.option_sources[name].dropdown(self.client) for name in names),
            return_exceptions=True,
        )
        if not (self.mounted and mount_token == self._mount_token):
            return
        for name, result in zip(names, results):
            if isinstance(result, ServiceError):
                logger.warning("Loading %s options failed: %s", name, result.message)
                self.error = result.message
                self.options[name] = []
            elif isinstance(result, BaseException):
                raise result
            else:
                self.options[name] = result

    # ----- search / filters -----

    def set_search(self, term: str) -> None:
        self.search_term = term or ""

    def set_filter(self, key: str, value: Optional[str]) -> None:
        if key not in self.filter_values:
            raise KeyError(f"{self.repository.plural} have no filter '{key}'")
        self.filter_values[key] = value or ALL

    # ----- modal -----

    def open_new(self) -> None:
        self.form.open_create()

    def open_edit(self, row: Mapping[str, Any]) -> None:
        self.form.open_edit(row)

    def close_modal(self) -> None:
        self.form.close()

    async def save(self) -> bool:
        """Create or update from the open form. On success reload and close; on failure keep the modal open."""
        if self.saving:
            return False
        self.error = None
        try:
            payload = self.form.submit()
        except ValidationFailure:
            return False
        editing = self.form.editing_row
        self.saving = True
        self.form.submitting = True
        try:
            if editing is None:
                await self.repository.create(self.client, payload)
            else:
                await self.repository.update(self.client, editing["id"], payload)
        except ServiceError as e:
            logger.warning("Saving %s failed: %s", self.repository.noun, e.message)
            self.form.error = e.message
            return False
        finally:
            self.saving = False
            self.form.submitting = False
        await self.load()
        self.form.close()
        return True

    def delete_prompt(self, row: Mapping[str, Any]) -> str:
        return f"Are you sure you want to delete {self.repository.noun} {self.repository.label(row)}?"

    async def delete(self, row: Mapping[str, Any], confirm: Confirm) -> bool:
        """Delete after confirmation; the row leaves the local list without a reload."""
        if self.deleting:
            return False
        answer = confirm(self.delete_prompt(row))
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer or self.deleting:
            return False
        self.error = None
        self.deleting = True
        try:
            await self.repository.remove(self.client, row["id"])
        except ServiceError as e:
            logger.warning("Deleting %s %s failed: %s", self.repository.noun, row.get("id"), e.message)
            self.error = e.message
            return False
        finally:
            self.deleting = False
        if self.mounted:
            self.rows = [r for r in self.rows if r["id"] != row["id"]]
            self._rows_version += 1
        return True
