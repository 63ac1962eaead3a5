"""Shared constants for cargo-nav endpoints and dot-directories."""

NAV_HOME_EXT = ".cargo-nav"  # user-level config directory suffix

NAV_HOME_DISPLAY = f"~/{NAV_HOME_EXT}"  # user-readable path hint

# crates.io JSON API root; the crate name is appended as the last path segment
DEFAULT_API_URL = "https://crates.io/api/v1/crates"

# crates.io web site root; crate pages live under /crates/<name>
DEFAULT_SITE_URL = "https://crates.io"

# Seconds before the registry request is abandoned
DEFAULT_TIMEOUT = 10.0

PROJECT_URL = "https://github.com/celeo/cargo-nav"
