from __future__ import annotations

import logging

import uvicorn

from jisho_api.logging_setup import setup_logging

from api.dependencies import get_config

logger = logging.getLogger("jisho_api")


def main() -> None:
    config = get_config()
    setup_logging(config.log_level, use_json=config.log_json, concise=config.log_concise)
    logger.info("launching jisho-api on '%s'", config.listen_addr)
    uvicorn.run(
        "api.app:app",
        host=config.listen_host,
        port=config.port,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
