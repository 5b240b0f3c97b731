"""Local configuration for catalogtree."""

from __future__ import annotations

import os


DEFAULT_CATALOG = "catalog.idw"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_USER_AGENT = "catalogtree/0.1"

# Parser constants: indentation is counted in two-character units and
# tokens without an explicit @t() entry are plain identifiers.
INDENT_UNIT = 2
DEFAULT_TOKEN_TYPE = "id"

CATALOGTREE_DEFAULT_CATALOG = os.getenv("CATALOGTREE_DEFAULT_CATALOG", DEFAULT_CATALOG)
CATALOGTREE_FETCH_TIMEOUT_S = float(os.getenv("CATALOGTREE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
CATALOGTREE_FETCH_MAX_RETRIES = int(os.getenv("CATALOGTREE_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
CATALOGTREE_FETCH_BACKOFF_S = float(os.getenv("CATALOGTREE_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
CATALOGTREE_LOG_LEVEL = os.getenv("CATALOGTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
CATALOGTREE_USER_AGENT = os.getenv("CATALOGTREE_USER_AGENT", DEFAULT_USER_AGENT)
