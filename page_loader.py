# Page archiving pipeline: fetch one page, localize its assets, save it to disk
import os
import logging

import file_handler
import html_processor
import asset_downloader
from fetchers import page_client

logger = logging.getLogger(__name__)


def render_and_write(soup, absolute_path):
    """Serializes the tree, pretty-prints it and writes it. Returns the path written."""
    return file_handler.save_html(html_processor.render_html(soup), absolute_path)


def archive_page(url, destination_dir=None, config=None):
    """
    Downloads `url` and its local assets into `destination_dir` (default: cwd).

    The destination is checked before any network call, and the HTML file is
    written last, only once every asset has been saved; a failed run leaves
    no HTML file behind.

    Returns:
        str: absolute path of the written HTML file.
    Raises:
        InvalidUrlError, DirectoryUnavailableError, HttpStatusError,
        TransportError, or OSError for unclassified filesystem failures.
    """
    if destination_dir is None:
        destination_dir = os.getcwd()

    source_url = page_client.validate_url(url)
    layout = file_handler.build_target_layout(url, destination_dir)
    load_directory = file_handler.to_absolute_path(destination_dir)

    file_handler.prepare_output(destination_dir, layout.assets_folder_path)

    logger.info(f"Starting loading page from {url}")
    content = page_client.fetch_page(url, config)
    soup = html_processor.load_document(content)

    resources = html_processor.extract_resources(soup, source_url)
    tasks = asset_downloader.download_assets(
        resources, source_url, layout.assets_folder_name, load_directory, config
    )
    logger.info(f"Loaded {len(tasks)} assets into {layout.assets_folder_path}")

    return render_and_write(soup, layout.html_file_path)
