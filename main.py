import logging
import sys

from gotify_proxy.constants import Settings
from gotify_proxy.controller import create_app

logger = logging.getLogger("gotify_proxy")

settings = Settings.from_env()
app = create_app(settings)


def main():
    logging.basicConfig(
        level=logging.DEBUG if settings.debug_mode else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Proxy iniciado, porta: %s", settings.listen_port)
    logger.info("Gotify: %s", settings.gotify_url)
    try:
        app.run(host='0.0.0.0', port=settings.listen_port, debug=settings.debug_mode, use_reloader=False)
    except OSError as exc:
        logger.error("Falha ao iniciar o servidor: %s", exc)
        sys.exit(1)


if __name__ == '__main__':
    main()
