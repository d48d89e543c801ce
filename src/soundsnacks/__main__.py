"""Main entry point for the SoundSnacks application."""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from soundsnacks import __version__
from soundsnacks.core.config import ConfigManager
from soundsnacks.core.playback import PlaybackController
from soundsnacks.core.sound_files import SoundFileStore
from soundsnacks.core.state import SoundboardStore
from soundsnacks.errors import StorageError
from soundsnacks.storage.repository import Repository
from soundsnacks.ui.main_window import MainWindow
from soundsnacks.ui.theme import theme_manager

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments without the program name; defaults to sys.argv.

    Returns:
        Parsed namespace with ``data_dir`` and ``debug``.
    """
    parser = argparse.ArgumentParser(
        prog="soundsnacks",
        description="SoundSnacks - a soundboard with color-coded categories",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="directory for the database and imported sounds (this run only)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the SoundSnacks application.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Set app metadata before creating QApplication (required for macOS)
    QApplication.setApplicationName("SoundSnacks")
    QApplication.setApplicationDisplayName("SoundSnacks")
    QApplication.setOrganizationName("SoundSnacks")
    QApplication.setApplicationVersion(__version__)

    app = QApplication(sys.argv[:1])

    config = ConfigManager(data_dir=args.data_dir)
    theme_manager.apply_preference(config.get_theme())
    theme_manager.connect_system_theme_changes()

    data_dir = config.ensure_data_dir()
    logger.info("Data directory: %s", data_dir)

    try:
        repository = Repository.open(config.database_url)
    except StorageError as e:
        logger.error("Cannot open the sound database: %s", e)
        return 1

    files = SoundFileStore(config.sounds_dir)
    playback = PlaybackController(files, volume=config.get_volume())
    store = SoundboardStore(repository, files, playback)

    window = MainWindow(store, playback, config)
    store.load()
    seeded = store.seed_categories()
    if seeded:
        window.show_status(f"Created {seeded} starter categories")
    window.show()

    try:
        return app.exec()
    finally:
        playback.stop()
        repository.close()
        config.sync()
        logger.info("SoundSnacks closed")


if __name__ == "__main__":
    sys.exit(main())
