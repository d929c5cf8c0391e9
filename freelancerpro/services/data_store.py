"""
Local data store: CRUD over one JSON aggregate document.

Every collection (users, clients, projects, tasks, quotes, contracts,
team members) lives in a single ``AppData`` document stored under one key.
Each mutating call reads the whole document, changes one collection and
writes the whole document back. There is no locking: two processes
writing concurrently will overwrite each other (last write wins).
"""

import logging
import random
import string
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from freelancerpro.models import (
    AppData,
    Client,
    ClientUpdate,
    Contract,
    ContractUpdate,
    Entity,
    EntityUpdate,
    Project,
    ProjectUpdate,
    Quote,
    QuoteUpdate,
    Reference,
    Task,
    TaskUpdate,
    TeamMember,
    TeamMemberUpdate,
    User,
)
from freelancerpro.services.demo_data import build_demo_data
from freelancerpro.storage import (
    DataCorruptionError,
    StoragePort,
    StorageReadError,
    StorageWriteError,
    create_storage,
)
from freelancerpro.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)

_BASE36_DIGITS = string.digits + string.ascii_lowercase

# Fields the store assigns itself on create
_GENERATED_FIELDS = ("id", "created_at", "updated_at", "createdAt", "updatedAt")


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_id() -> str:
    """
    Generate a short identifier: base-36 milliseconds plus a random tail.

    Uniqueness is probabilistic. The store additionally rejects ids already
    present in the target collection.
    """
    millis = int(time.time() * 1000)
    return _to_base36(millis) + _to_base36(random.getrandbits(48)).rjust(10, "0")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class DataStore:
    """
    Synchronous CRUD store for all FreelancerPro entities.

    Args:
        storage: Key/value backend holding the serialized document
        data_key: Key of the aggregate document
        session_key: Key of the current-user marker
        clock: Callable returning the current UTC time (injectable for tests)

    Example:
        >>> from freelancerpro.storage import InMemoryStorage
        >>> store = DataStore(InMemoryStorage())
        >>> client = store.create_client(
        ...     name="Acme", email="a@acme.com", status="prospect", user_id="u1"
        ... )
        >>> [c.name for c in store.get_clients_by_user_id("u1")]
        ['Acme']
    """

    def __init__(
        self,
        storage: StoragePort,
        data_key: str = "freelancer_app_data",
        session_key: str = "current_user",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.storage = storage
        self.data_key = data_key
        self.session_key = session_key
        self._clock = clock or utc_now

    @classmethod
    def from_config(cls, config, storage: Optional[StoragePort] = None) -> "DataStore":
        """Build a store from a FreelancerProConfig."""
        return cls(
            storage if storage is not None else create_storage(config),
            data_key=config.data_key,
            session_key=config.session_key,
        )

    # ------------------------------------------------------------------
    # Document persistence
    # ------------------------------------------------------------------

    def load(self) -> AppData:
        """
        Read the aggregate document.

        An absent document yields an empty one. An unreadable or malformed
        document is logged and also yields an empty one; this method never
        raises.
        """
        try:
            return self.read_document()
        except StorageReadError as e:
            logger.error(f"Error loading data, falling back to empty document: {e}")
            return AppData()

    def save(self, data: AppData) -> None:
        """
        Persist the full aggregate document.

        Raises:
            StorageWriteError: If the backend rejected the write
        """
        try:
            self.storage.set(self.data_key, data.to_json())
        except StorageWriteError as e:
            logger.error(f"Error saving data: {e}")
            raise

    def has_data(self) -> bool:
        """True when a readable document with at least one user exists."""
        try:
            return len(self.read_document().users) > 0
        except StorageReadError:
            return False

    def clear(self) -> None:
        """Remove the stored document."""
        self.storage.remove(self.data_key)
        logger.info("Cleared stored data")

    @log_function_call
    def load_demo_data(self, demo: Optional[AppData] = None) -> AppData:
        """
        Replace the stored document with the demo dataset.

        The first demo user becomes the current user (password blanked).

        Args:
            demo: Dataset to install; defaults to the bundled demo data

        Returns:
            The installed document
        """
        if demo is None:
            demo = build_demo_data()

        self.save(demo)
        if demo.users:
            marker = demo.users[0].without_password()
            try:
                self.storage.set(self.session_key, marker.model_dump_json(by_alias=True))
            except StorageWriteError as e:
                logger.error(f"Error saving demo session: {e}")
                raise

        logger.info(
            f"Loaded demo data ({len(demo.users)} users, {len(demo.clients)} clients, "
            f"{len(demo.projects)} projects, {len(demo.tasks)} tasks)"
        )
        return demo

    def read_document(self) -> AppData:
        """
        Strict read of the aggregate document.

        Raises:
            StorageReadError: If the backend cannot be read
            DataCorruptionError: If the stored text is not a valid document
        """
        raw = self.storage.get(self.data_key)
        if raw is None:
            return AppData()

        try:
            return AppData.from_json(raw)
        except ValidationError as e:
            raise DataCorruptionError(
                f"Stored document '{self.data_key}' is malformed: "
                f"{e.error_count()} validation error(s)",
                key=self.data_key,
            ) from e

    def _load_for_write(self) -> AppData:
        # Never overwrite an unreadable document with an empty one
        try:
            return self.read_document()
        except StorageReadError as e:
            logger.error(f"Refusing to modify unreadable document: {e}")
            raise

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def _next_timestamp(self, previous: Optional[datetime] = None) -> datetime:
        now = self._clock()
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    def _new_id(self, existing: Iterable[Entity]) -> str:
        taken = {item.id for item in existing}
        new_id = generate_id()
        while new_id in taken:
            logger.warning(f"Generated id {new_id} already exists, regenerating")
            new_id = generate_id()
        return new_id

    @staticmethod
    def _find_index(items: List[E], entity_id: str) -> Optional[int]:
        for index, item in enumerate(items):
            if item.id == entity_id:
                return index
        return None

    def _create(self, collection: str, model_cls: Type[E], fields: Mapping[str, Any]) -> E:
        payload = {k: v for k, v in fields.items() if k not in _GENERATED_FIELDS}
        data = self._load_for_write()
        items = getattr(data, collection)

        now = self._next_timestamp()
        entity = model_cls.model_validate(
            {**payload, "id": self._new_id(items), "created_at": now, "updated_at": now}
        )

        items.append(entity)
        self.save(data)
        logger.info(f"Created {model_cls.__name__} {entity.id}")
        return entity

    def _update(
        self,
        collection: str,
        update_cls: Type[EntityUpdate],
        entity_id: str,
        updates: Union[EntityUpdate, Mapping[str, Any]],
    ) -> Optional[Any]:
        if not isinstance(updates, update_cls):
            updates = update_cls.model_validate(dict(updates))

        data = self._load_for_write()
        items = getattr(data, collection)
        index = self._find_index(items, entity_id)
        if index is None:
            logger.info(f"No record {entity_id} in {collection}, nothing updated")
            return None

        current = items[index]
        merged = {
            **current.model_dump(),
            **updates.changes(),
            "updated_at": self._next_timestamp(current.updated_at),
        }
        updated = type(current).model_validate(merged)

        items[index] = updated
        self.save(data)
        logger.info(f"Updated {type(current).__name__} {entity_id}")
        return updated

    def _delete(self, collection: str, entity_id: str) -> bool:
        data = self._load_for_write()
        items = getattr(data, collection)
        index = self._find_index(items, entity_id)
        if index is None:
            logger.info(f"No record {entity_id} in {collection}, nothing deleted")
            return False

        del items[index]
        self.save(data)
        logger.info(f"Deleted {entity_id} from {collection}")
        return True

    def _filter(self, collection: str, field: str, value: Any) -> list:
        items = getattr(self.load(), collection)
        return [item for item in items if getattr(item, field) == value]

    def _find(self, collection: str, field: str, value: Any):
        for item in getattr(self.load(), collection):
            if getattr(item, field) == value:
                return item
        return None

    def _resolve(self, collection: str, kind: str, entity_id: Optional[str]) -> Reference:
        if not entity_id:
            return Reference(target_id=None, kind=kind)
        return Reference(
            target_id=entity_id, entity=self._find(collection, "id", entity_id), kind=kind
        )

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    @log_function_call
    def create_user(self, **fields) -> User:
        """
        Create a user account.

        Raises:
            ValueError: If another user already has this email
        """
        email = fields.get("email")
        if email is not None and self.get_user_by_email(email) is not None:
            raise ValueError(f"A user with email {email} already exists")
        return self._create("users", User, fields)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self._find("users", "email", email.strip())

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self._find("users", "id", user_id)

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------

    @log_function_call
    def create_client(self, **fields) -> Client:
        return self._create("clients", Client, fields)

    def get_clients_by_user_id(self, user_id: str) -> List[Client]:
        return self._filter("clients", "user_id", user_id)

    @log_function_call
    def update_client(
        self, client_id: str, updates: Union[ClientUpdate, Mapping[str, Any]]
    ) -> Optional[Client]:
        return self._update("clients", ClientUpdate, client_id, updates)

    @log_function_call
    def delete_client(self, client_id: str) -> bool:
        """Delete a client. Projects, quotes and contracts keep their clientId."""
        return self._delete("clients", client_id)

    def resolve_client(self, client_id: Optional[str]) -> Reference:
        return self._resolve("clients", "client", client_id)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    @log_function_call
    def create_project(self, **fields) -> Project:
        return self._create("projects", Project, fields)

    def get_projects_by_user_id(self, user_id: str) -> List[Project]:
        return self._filter("projects", "user_id", user_id)

    def get_projects_by_client_id(self, client_id: str) -> List[Project]:
        return self._filter("projects", "client_id", client_id)

    @log_function_call
    def update_project(
        self, project_id: str, updates: Union[ProjectUpdate, Mapping[str, Any]]
    ) -> Optional[Project]:
        return self._update("projects", ProjectUpdate, project_id, updates)

    def resolve_project(self, project_id: Optional[str]) -> Reference:
        return self._resolve("projects", "project", project_id)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    @log_function_call
    def create_task(self, **fields) -> Task:
        return self._create("tasks", Task, fields)

    def get_tasks_by_user_id(self, user_id: str) -> List[Task]:
        return self._filter("tasks", "user_id", user_id)

    def get_tasks_by_project_id(self, project_id: str) -> List[Task]:
        return self._filter("tasks", "project_id", project_id)

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return self._find("tasks", "id", task_id)

    @log_function_call
    def update_task(
        self, task_id: str, updates: Union[TaskUpdate, Mapping[str, Any]]
    ) -> Optional[Task]:
        return self._update("tasks", TaskUpdate, task_id, updates)

    # ------------------------------------------------------------------
    # Quotes
    # ------------------------------------------------------------------

    @log_function_call
    def create_quote(self, **fields) -> Quote:
        return self._create("quotes", Quote, fields)

    def get_quotes_by_user_id(self, user_id: str) -> List[Quote]:
        return self._filter("quotes", "user_id", user_id)

    @log_function_call
    def update_quote(
        self, quote_id: str, updates: Union[QuoteUpdate, Mapping[str, Any]]
    ) -> Optional[Quote]:
        return self._update("quotes", QuoteUpdate, quote_id, updates)

    # ------------------------------------------------------------------
    # Contracts
    # ------------------------------------------------------------------

    @log_function_call
    def create_contract(self, **fields) -> Contract:
        return self._create("contracts", Contract, fields)

    def get_contracts_by_user_id(self, user_id: str) -> List[Contract]:
        return self._filter("contracts", "user_id", user_id)

    @log_function_call
    def update_contract(
        self, contract_id: str, updates: Union[ContractUpdate, Mapping[str, Any]]
    ) -> Optional[Contract]:
        return self._update("contracts", ContractUpdate, contract_id, updates)

    # ------------------------------------------------------------------
    # Team members
    # ------------------------------------------------------------------

    @log_function_call
    def create_team_member(self, **fields) -> TeamMember:
        return self._create("team_members", TeamMember, fields)

    def get_team_members_by_user_id(self, user_id: str) -> List[TeamMember]:
        return self._filter("team_members", "user_id", user_id)

    @log_function_call
    def update_team_member(
        self, member_id: str, updates: Union[TeamMemberUpdate, Mapping[str, Any]]
    ) -> Optional[TeamMember]:
        return self._update("team_members", TeamMemberUpdate, member_id, updates)

    @log_function_call
    def delete_team_member(self, member_id: str) -> bool:
        """Delete a team member. Tasks keep their assigneeId."""
        return self._delete("team_members", member_id)

    def resolve_team_member(self, member_id: Optional[str]) -> Reference:
        return self._resolve("team_members", "team member", member_id)
