"""Qt application bootstrap.

Sets up QApplication, loads configuration, checks the viewer's privileges and
launches the main window.
"""

import sys
import logging
from PySide6.QtWidgets import QApplication, QMessageBox
import requests

from ulm.config import load_typed_config, validate_api_config
from ulm.api.client import UserApiClient
from .controllers import UserListController, RowDeleteController
from .dialogs import MessageBoxDialogs
from .main_window import MainWindow
from .utils.async_loader import QtTaskRunner
from .views import UsersView

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Configure logging for the GUI."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def build_client(config) -> UserApiClient:
    """Create the API client from typed config."""
    base_url = validate_api_config(config.to_dict())
    return UserApiClient(
        base_url,
        token=config.api.token,
        timeout=config.api.timeout,
        max_retries=config.api.max_retries,
    )


def viewer_is_admin(client: UserApiClient) -> bool:
    """Resolve the privilege predicate; any failure counts as not privileged."""
    try:
        return client.current_user().is_admin
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Could not determine current user: {e}")
        return False


def build_users_view(client, runner, dialogs, users_config) -> UsersView:
    """Wire both controllers to a new UsersView.

    Args:
        client: User API (list_users and delete_user)
        runner: TaskRunner for background requests
        dialogs: HostDialogs for confirmations and notices
        users_config: UsersConfig with page size and search debounce
    """
    list_controller = UserListController(
        client,
        runner,
        page_size=users_config.page_size,
        debounce_ms=users_config.search_debounce_ms,
    )
    delete_controller = RowDeleteController(client, runner, list_controller, dialogs)
    return UsersView(list_controller, delete_controller)


def main() -> int:
    """Main entry point for GUI application.

    Returns:
        Exit code
    """
    app = QApplication(sys.argv)
    app.setApplicationName("User List Manager")
    app.setOrganizationName("ULM")
    app.setStyle("Fusion")

    runner = None
    try:
        logger.info("Loading configuration...")
        config = load_typed_config()
        setup_logging(config.log_level)
        logger.info("Starting User List Manager GUI...")

        client = build_client(config)
        is_admin = viewer_is_admin(client)

        runner = QtTaskRunner()
        users_view = None
        list_controller = None
        if is_admin:
            dialogs = MessageBoxDialogs()
            users_view = build_users_view(client, runner, dialogs, config.users)
            dialogs.parent_widget = users_view
            list_controller = users_view.list_controller

        window = MainWindow(is_admin, users_view)
        window.show()

        if list_controller is not None:
            list_controller.start()

        logger.info("GUI ready")
        return app.exec()

    except Exception as e:
        logger.exception("Failed to start GUI")
        QMessageBox.critical(
            None,
            "Startup Error",
            f"Failed to start application:\n\n{str(e)}\n\n"
            f"Check the ULM__API__BASE_URL setting and that the API is reachable.",
        )
        return 1
    finally:
        if runner is not None:
            runner.wait_all()


if __name__ == "__main__":
    sys.exit(main())
