# Module for rewriting asset references and downloading the assets concurrently

import os
import logging
import concurrent.futures
from collections import namedtuple
from urllib.parse import urljoin

import constants # Import constants
import file_handler
import html_processor
from errors import PageLoaderError
from fetchers import page_client

logger = logging.getLogger(__name__)

AssetTask = namedtuple(
    "AssetTask",
    ["remote_url", "local_relative_path", "local_absolute_path", "element", "attribute"],
)


def local_asset_link(asset_url, source_url, assets_folder_name):
    """assets_folder/<page host, dots dashed><asset path, slashes dashed>"""
    host_prefix = source_url.hostname.replace('.', constants.NAME_SEPARATOR)
    return f"{assets_folder_name}/{host_prefix}{file_handler.derive_asset_file_name(asset_url)}"


def build_asset_tasks(resources, source_url, assets_folder_name, load_directory):
    """
    Creates one AssetTask per matched element and rewrites the element's
    attribute to the local path right away, before anything is downloaded.
    """
    origin = html_processor.source_origin(source_url)
    tasks = []
    for (_tag_name, attribute), elements in resources.items():
        for element in elements:
            src = html_processor.get_attribute(element, attribute)
            asset_url = urljoin(origin, src)
            local_link = local_asset_link(asset_url, source_url, assets_folder_name)
            absolute_path = file_handler.to_absolute_path(os.path.join(load_directory, local_link))

            logger.debug(f"Adding task of loading {asset_url} to {absolute_path}")
            tasks.append(AssetTask(asset_url, local_link, absolute_path, element, attribute))

            html_processor.set_attribute(element, attribute, local_link)
    return tasks


def dedupe_tasks(tasks):
    """Keeps the first task for each remote URL, preserving order."""
    unique = {}
    for task in tasks:
        unique.setdefault(task.remote_url, task)
    return list(unique.values())


def run_downloads(tasks, config=None):
    """
    Downloads every task concurrently and waits for all of them.

    A failure does not cancel siblings already in flight; once every download
    has finished, the first failure observed is raised. Files written by the
    successful downloads are left in place.
    """
    if not tasks:
        return []

    config = config or {}
    max_workers = config.get('max_workers') or len(tasks)
    logger.debug(f"Running {len(tasks)} tasks with {max_workers} workers")

    first_error = None
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_map = {
            executor.submit(page_client.download_asset, task.remote_url, task.local_absolute_path, config): task
            for task in tasks
        }
        for future in concurrent.futures.as_completed(future_map):
            task = future_map[future]
            try:
                future.result()
            except (PageLoaderError, OSError) as e:
                logger.error(f"Error loading asset {task.remote_url}: {e}")
                if first_error is None:
                    first_error = e

    if first_error is not None:
        raise first_error
    return tasks


def download_assets(resources, source_url, assets_folder_name, load_directory, config=None):
    """
    Rewrites every matched element to its local path, then downloads each
    distinct asset once. Returns the executed (deduplicated) tasks.
    """
    tasks = build_asset_tasks(resources, source_url, assets_folder_name, load_directory)
    unique_tasks = dedupe_tasks(tasks)
    if len(unique_tasks) < len(tasks):
        logger.debug(f"Skipped {len(tasks) - len(unique_tasks)} duplicate asset references")
    return run_downloads(unique_tasks, config)
