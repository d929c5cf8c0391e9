"""Objects shared by every CLI command through ``click.pass_obj``."""

from dataclasses import dataclass

from freelancerpro.cli.error_handlers import NotLoggedInError
from freelancerpro.config import FreelancerProConfig
from freelancerpro.models import User
from freelancerpro.services import AuthService, DataStore, KanbanBoard


@dataclass
class AppContext:
    """Configured services for one CLI invocation."""

    config: FreelancerProConfig
    store: DataStore
    auth: AuthService
    debug: bool = False

    @classmethod
    def from_config(cls, config: FreelancerProConfig, debug: bool = False) -> "AppContext":
        store = DataStore.from_config(config)
        auth = AuthService(store, hash_method=config.password_hash_method)
        return cls(config=config, store=store, auth=auth, debug=debug or config.debug)

    def require_user(self) -> User:
        """Return the current user or raise NotLoggedInError."""
        user = self.auth.get_current_user()
        if user is None:
            raise NotLoggedInError()
        return user

    def kanban(self) -> KanbanBoard:
        return KanbanBoard(self.store, strict=self.config.kanban_strict_transitions)
