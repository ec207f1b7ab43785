"""CLI state container."""

from ..app import App, create_app
from ..config.settings import Settings


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and builds the App lazily, so commands that fail option
    parsing never select an environment.
    """

    def __init__(self, settings: Settings, app_factory=create_app):
        self.settings = settings
        self._app_factory = app_factory
        self._app: App | None = None

    @property
    def app(self) -> App:
        if self._app is None:
            self._app = self._app_factory(self.settings)
        return self._app
