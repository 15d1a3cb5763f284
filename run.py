# run.py
import logging
import sys

from cancer_api import create_app
from cancer_api.core.config import Config
from cancer_api.core.errors import ModelLoadError

log = logging.getLogger("cancer_api")


def main():
    try:
        app = create_app()
    except ModelLoadError as e:
        # tanpa model server tidak boleh menerima request
        log.critical("Startup failed: %s", e)
        sys.exit(1)

    log.info("Server running on http://%s:%s", Config.HOST, Config.PORT)
    app.run(host=Config.HOST, port=Config.PORT, threaded=True)


if __name__ == "__main__":
    main()
