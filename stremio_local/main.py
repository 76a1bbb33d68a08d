"""Entry point: scan the media dir and start the addon server."""
import logging
import sys
from typing import List, Optional

from stremio_local.config.settings import settings
from stremio_local.library import scan_media_dir
from stremio_local.metadata import ArtworkResolver, ResolutionCache, TMDBClient
from stremio_local.web.server import create_app, run_server


# Configure logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    handlers=[
        logging.FileHandler("stremio_local.log"),
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main entry point. An optional first argument overrides MEDIA_DIR."""
    args = sys.argv[1:] if argv is None else argv
    media_dir = args[0] if args else settings.media_dir

    try:
        logger.info("Starting Local Media addon...")

        if not settings.tmdb_api_key:
            logger.warning("TMDB_API_KEY not set. Backgrounds will be generated placeholders.")

        library = scan_media_dir(media_dir)
        logger.info(f"Serving {len(library)} items from {media_dir}")

        client = TMDBClient(api_key=settings.tmdb_api_key, timeout=settings.tmdb_timeout)
        resolver = ArtworkResolver(api_key=settings.tmdb_api_key, cache=ResolutionCache(), client=client)

        app = create_app(settings, library=library, resolver=resolver)
        run_server(app, settings.addon_host, settings.addon_port)

    except KeyboardInterrupt:
        logger.info("Addon stopped by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        logger.error("Check the error above and verify your environment / .env file")
        sys.exit(1)


if __name__ == "__main__":
    main()
