# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations
from cvkit.settings import SETTINGS
from cvkit.utils.logging import setup_logger
from .server import create_app

def main() -> None:
    setup_logger(SETTINGS.log_level, SETTINGS.log_json)
    app = create_app()
    app.run(transport="stdio")

if __name__ == "__main__":
    main()
