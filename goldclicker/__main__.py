"""Entry point for Gold Clicker: python -m goldclicker"""

import argparse
import logging
from pathlib import Path

from goldclicker.app import GoldClickerApp
from goldclicker.data.balance import BALANCE
from goldclicker.engine.session import GameSession
from goldclicker.engine.store import FileStore


def main() -> None:
    parser = argparse.ArgumentParser(description="Gold Clicker: an idle mining game")
    parser.add_argument(
        "--save-dir",
        type=Path,
        default=BALANCE.save.save_dir,
        help=f"Directory holding the save and log (default: {BALANCE.save.save_dir})",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = parser.parse_args()

    # Log to a file: stderr output would draw over the TUI
    args.save_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=args.save_dir / BALANCE.save.log_file,
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = GameSession(FileStore(args.save_dir))
    app = GoldClickerApp(session)
    app.run()


if __name__ == "__main__":
    main()
