import logging

import uvicorn

from trackinfo.main import create_app

logger = logging.getLogger("trackinfo")


def main():
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    port = app.state.settings.port
    logger.info(f"Server started at port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
