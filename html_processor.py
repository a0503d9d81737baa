# Module for HTML parsing, local asset discovery, and rendering

import logging

# Set up a specific logger for this module
logger = logging.getLogger(__name__)

from bs4 import BeautifulSoup
import constants # Import constants


# --- Document Model ---
def load_document(html_content):
    """
    Parses HTML leniently into a mutable tree.
    Malformed markup is absorbed by the parser rather than raised.
    """
    return BeautifulSoup(html_content or "", 'html.parser')

def select_elements(soup, tag_name):
    """Yields elements named `tag_name` lazily, in document order."""
    for element in soup.descendants:
        if getattr(element, 'name', None) == tag_name:
            yield element

def get_attribute(element, name):
    value = element.get(name)
    if isinstance(value, list): # Multi-valued attributes (e.g. rel, class)
        value = " ".join(value)
    return value

def set_attribute(element, name, value):
    element[name] = value

def serialize(soup):
    return str(soup)

def render_html(soup):
    """
    Renders the current tree state as pretty-printed HTML: one node per line,
    stable indentation, double-quoted attributes, trailing whitespace trimmed.
    """
    return soup.prettify().strip()


# --- Asset Discovery ---
def source_origin(source_url):
    """scheme://netloc of an already parsed URL."""
    return f"{source_url.scheme}://{source_url.netloc}"

def is_local_asset(value, source_url, allowed_urls=constants.ALLOWED_EXTERNAL_ASSETS):
    """True for same-origin, root-relative, path-relative or allow-listed references."""
    if not value:
        return False
    return (
        value.startswith(source_origin(source_url))
        or value.startswith('/')
        or (bool(source_url.path) and value.startswith(source_url.path))
        or value in allowed_urls
    )

def find_local_assets(soup, tag_name, attribute, source_url, allowed_urls=constants.ALLOWED_EXTERNAL_ASSETS):
    """Returns the `tag_name` elements whose `attribute` references a local asset, in document order."""
    return [
        element for element in select_elements(soup, tag_name)
        if is_local_asset(get_attribute(element, attribute), source_url, allowed_urls)
    ]

def extract_resources(soup, source_url, rules=constants.DEFAULT_RESOURCE_RULES,
                      allowed_urls=constants.ALLOWED_EXTERNAL_ASSETS):
    """
    Groups local asset elements by resource rule.

    Returns:
        dict: {ResourceRule: [element, ...]} in rule order, document order within each group.
    """
    resources = {}
    for rule in rules:
        tag_name, attribute = rule
        resources[rule] = find_local_assets(soup, tag_name, attribute, source_url, allowed_urls)
        logger.debug(f"Found {len(resources[rule])} local '{tag_name}[{attribute}]' references")
    return resources
