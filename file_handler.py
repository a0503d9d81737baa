# Module for file system operations (naming, output directories, saving)

import os
import re
import logging
from collections import namedtuple
from urllib.parse import urlparse
import constants # Import constants
from errors import DirectoryUnavailableError

TargetLayout = namedtuple("TargetLayout", ["html_file_path", "assets_folder_name", "assets_folder_path"])

_SCHEME_PREFIX = re.compile(r'^(\w+:)?//')
_NON_WORD = re.compile(r'\W', re.ASCII)


# --- Naming ---
def derive_page_file_name(url):
    """Builds the page filename: scheme stripped, non-word characters dashed."""
    without_scheme = _SCHEME_PREFIX.sub('', url)
    return f"{_NON_WORD.sub(constants.NAME_SEPARATOR, without_scheme)}{constants.PAGE_EXTENSION}"

def derive_asset_file_name(url):
    """Turns the path component of an asset URL into a flat filename."""
    return urlparse(url).path.replace('/', constants.NAME_SEPARATOR)

def derive_assets_folder_name(page_file_path):
    stem, _ext = os.path.splitext(os.path.basename(page_file_path))
    return f"{stem}{constants.ASSETS_FOLDER_SUFFIX}"

def to_absolute_path(path):
    return os.path.abspath(path)

def build_target_layout(url, destination_dir):
    """
    Computes where the page and its assets go. Pure function of its inputs,
    so re-running against the same URL and directory overwrites prior output.
    """
    load_directory = to_absolute_path(destination_dir)
    html_file_path = to_absolute_path(os.path.join(load_directory, derive_page_file_name(url)))
    assets_folder_name = derive_assets_folder_name(html_file_path)
    assets_folder_path = to_absolute_path(os.path.join(load_directory, assets_folder_name))
    return TargetLayout(html_file_path, assets_folder_name, assets_folder_path)


# --- Output Directories ---
def prepare_output(destination_dir, assets_folder_path):
    """
    Confirms the destination directory is usable and creates the assets folder.
    Raises DirectoryUnavailableError if the destination is missing or inaccessible;
    any other OSError propagates unchanged.
    """
    try:
        # The scandir handle is closed on exit from the with-block
        with os.scandir(destination_dir):
            pass
    except (FileNotFoundError, NotADirectoryError, PermissionError) as e:
        logging.error(f"Destination directory {destination_dir} is unavailable: {e}")
        raise DirectoryUnavailableError(destination_dir, cause=e) from e

    os.makedirs(assets_folder_path, exist_ok=True)
    logging.debug(f"Prepared assets folder {assets_folder_path}")


# --- File Saving ---
def save_html(html_content, absolute_path):
    """Writes the HTML text, overwriting any existing file. Returns the path written."""
    with open(absolute_path, 'w', encoding='utf-8') as f:
        f.write(html_content)
    logging.info(f"Successfully saved HTML: {absolute_path}")
    return absolute_path

def save_asset(chunks, absolute_path):
    """Streams byte chunks into the asset file (binary mode). Returns the byte count."""
    written = 0
    with open(absolute_path, 'wb') as f:
        for chunk in chunks:
            if chunk: # Skip keep-alive chunks
                f.write(chunk)
                written += len(chunk)
    logging.debug(f"Saved asset {absolute_path} ({written} bytes)")
    return written
