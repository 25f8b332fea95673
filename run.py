from __future__ import annotations

import logging

from src.class_journal.class_journal.main import create_app

logger = logging.getLogger("class_journal")


def main() -> None:
    app = create_app()
    socketio = app.extensions["socketio"]
    host = app.config["HOST"]
    port = app.config["PORT"]

    logger.info("Server listening on port %s", port)
    logger.info("Health check: http://localhost:%s/api/health", port)
    socketio.run(app, host=host, port=port, debug=app.config["DEBUG"], allow_unsafe_werkzeug=True)


if __name__ == "__main__":
    main()
