"""Flask web server exposing the media library as a Stremio addon."""
import logging
import re
from pathlib import Path
from typing import Optional, Dict, Any

from flask import Blueprint, Flask, current_app, jsonify, request, send_from_directory, url_for
from flask_cors import CORS
from werkzeug.exceptions import NotFound

from stremio_local.config.settings import Settings
from stremio_local.library import MediaItem, MediaLibrary, scan_media_dir
from stremio_local.library.scanner import ID_PREFIX
from stremio_local.metadata import ArtworkResolver, ResolutionCache, TMDBClient, placeholder_poster

logger = logging.getLogger(__name__)

# Application version - update this when making changes
APP_VERSION = "1.0.0"

ADDON_ID = "stremio-local"
ADDON_NAME = "Local Media"

SUBTITLE_MIMETYPES = {
    '.srt': 'application/x-subrip',
    '.vtt': 'text/vtt',
}

EXTRA_NAMES = ('search', 'skip', 'genre', 'filename', 'videoSize', 'videoHash')
_EXTRA_SPLIT = re.compile(r'&(?=(?:' + '|'.join(EXTRA_NAMES) + r')=)')

addon = Blueprint('addon', __name__)


def get_library() -> MediaLibrary:
    """Get the media library of the running app."""
    return current_app.config['MEDIA_LIBRARY']


def get_resolver() -> ArtworkResolver:
    """Get the artwork resolver of the running app."""
    return current_app.config['ARTWORK_RESOLVER']


def parse_extra(extra: Optional[str]) -> Dict[str, str]:
    """
    Parse the Stremio "extra" path segment.

    The routing layer has already percent-decoded the segment, so values are
    taken as they are. A value may itself contain "&" ("Tom&Jerry"); pairs
    are only split before a known extra name.

    Args:
        extra: Decoded segment such as "search=the traitors&skip=0", or None

    Returns:
        Dict of the first value for each key
    """
    if not extra:
        return {}
    parsed = {}
    for pair in _EXTRA_SPLIT.split(extra):
        key, _, value = pair.partition('=')
        if key and value:
            parsed.setdefault(key, value)
    return parsed


def file_url(rel_path: str) -> str:
    """Absolute URL under /files/ for a path relative to the media dir."""
    return url_for('addon.serve_file', rel_path=rel_path, _external=True)


def format_preview(item: MediaItem) -> Dict[str, Any]:
    """Catalog entry for an item."""
    return {
        'id': item.id,
        'type': 'movie',
        'name': item.display_title,
        'poster': placeholder_poster(item.display_title),
    }


def format_meta(item: MediaItem) -> Dict[str, Any]:
    """Full meta object for an item, background resolved through TMDB."""
    meta = format_preview(item)
    meta.update({
        'background': get_resolver().resolve(item.title),
        'description': f"Local file {item.rel_path}",
        'genres': ['Local'],
    })
    if item.year:
        meta['releaseInfo'] = str(item.year)
    return meta


@addon.route('/manifest.json')
def manifest():
    """Addon manifest listing one catalog per top-level folder."""
    catalogs = [
        {
            'type': 'movie',
            'id': catalog_id,
            'name': catalog_id,
            'extra': [{'name': 'search', 'isRequired': False}],
        }
        for catalog_id in get_library().catalog_ids()
    ]
    return jsonify({
        'id': ADDON_ID,
        'version': APP_VERSION,
        'name': ADDON_NAME,
        'description': "Movies and shows from a local folder",
        'resources': ['catalog', 'meta', 'stream', 'subtitles'],
        'types': ['movie'],
        'idPrefixes': [ID_PREFIX],
        'catalogs': catalogs,
    })


@addon.route('/catalog/movie/<catalog_id>.json')
@addon.route('/catalog/movie/<catalog_id>/<extra>.json')
def catalog(catalog_id: str, extra: Optional[str] = None):
    """List the items of a catalog, optionally filtered by a search term."""
    logger.debug(f"Catalog request: {request.path}")
    library = get_library()
    items = library.catalog(catalog_id)
    if items is None:
        return jsonify({'metas': []}), 404

    search = parse_extra(extra).get('search')
    if search:
        items = library.search(catalog_id, search)

    return jsonify({'metas': [format_preview(item) for item in items]})


@addon.route('/meta/movie/<item_id>.json')
def meta(item_id: str):
    """Details for a single item."""
    item = get_library().get(item_id)
    if not item:
        return jsonify({'meta': None}), 404
    return jsonify({'meta': format_meta(item)})


@addon.route('/stream/movie/<item_id>.json')
def stream(item_id: str):
    """Direct HTTP stream of the video file."""
    item = get_library().get(item_id)
    if not item:
        return jsonify({'streams': []}), 404
    return jsonify({
        'streams': [
            {'title': item.display_title, 'url': file_url(item.rel_path)},
        ]
    })


@addon.route('/subtitles/movie/<item_id>.json')
@addon.route('/subtitles/movie/<item_id>/<extra>.json')
def subtitles(item_id: str, extra: Optional[str] = None):
    """Subtitle files found next to the video."""
    item = get_library().get(item_id)
    if not item:
        return jsonify({'subtitles': []})
    return jsonify({
        'subtitles': [
            {'id': sub.id, 'url': file_url(sub.rel_path), 'lang': sub.lang}
            for sub in item.subtitles
        ]
    })


@addon.route('/files/<path:rel_path>')
def serve_file(rel_path: str):
    """Serve a media or subtitle file from the media dir."""
    mimetype = SUBTITLE_MIMETYPES.get(Path(rel_path).suffix.lower())
    try:
        return send_from_directory(str(get_library().media_dir), rel_path, mimetype=mimetype)
    except NotFound:
        logger.warning(f"File not found or outside media dir: {rel_path}")
        return jsonify({'error': 'Not found'}), 404


@addon.route('/health')
def health():
    """Health check endpoint."""
    library = get_library()
    return jsonify({
        'status': 'ok',
        'version': APP_VERSION,
        'items': len(library),
        'catalogs': len(library.catalogs),
        'cached_artwork': get_resolver().cache.size(),
    })


def create_app(settings: Settings, library: Optional[MediaLibrary] = None,
               resolver: Optional[ArtworkResolver] = None) -> Flask:
    """
    Create the addon Flask app.

    Args:
        settings: Application settings
        library: Pre-scanned library; scanned from settings.media_dir if None
        resolver: Artwork resolver; built from the TMDB settings if None

    Returns:
        Configured Flask app
    """
    if library is None:
        library = scan_media_dir(settings.media_dir)
    if resolver is None:
        client = TMDBClient(api_key=settings.tmdb_api_key, timeout=settings.tmdb_timeout)
        resolver = ArtworkResolver(api_key=settings.tmdb_api_key, cache=ResolutionCache(), client=client)

    app = Flask(__name__)
    app.config['DEBUG'] = False
    app.config['MEDIA_LIBRARY'] = library
    app.config['ARTWORK_RESOLVER'] = resolver
    CORS(app)
    app.register_blueprint(addon)
    return app


def run_server(app: Flask, host: str = "0.0.0.0", port: int = 8081):
    """Run the addon with Flask's threaded server."""
    logger.info(f"Addon listening on {host}:{port}, manifest at /manifest.json")
    try:
        app.run(host=host, port=port, threaded=True, use_reloader=False)
    except OSError as e:
        if "Address already in use" in str(e):
            logger.error(f"Port {port} is already in use. Please choose a different port or stop the service using it.")
        elif "Permission denied" in str(e):
            logger.error(f"Permission denied to bind to port {port}. Use a port > 1024.")
        else:
            logger.error(f"Failed to start addon server: {e}")
        raise
