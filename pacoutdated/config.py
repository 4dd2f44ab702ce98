"""
Configuration defaults for pacoutdated
=================================================================================
PURPOSE: Centralized default settings for the outdated-package checker.
         These values are read by ConfigLoader, which lets a YAML file and
         environment variables override them.

ORGANIZATION:
1. Pacman locations
2. Network behaviour
3. Diagnostics
"""

# ==============================================================================
# 1. PACMAN LOCATIONS
# ==============================================================================

# PACMAN_CONF_PATH: Repository configuration ([core], [extra], ... sections)
# Can be overridden by PACOUTDATED_PACMAN_CONF environment variable
PACMAN_CONF_PATH = "/etc/pacman.conf"

# LOCAL_DB_DIR: Local package database, one subdirectory per installed package
# Can be overridden by PACOUTDATED_LOCAL_DB environment variable
LOCAL_DB_DIR = "/var/lib/pacman/local"

# ARCH: Value substituted for $arch in server URLs
# None means detect the running machine's architecture
ARCH = None

# ==============================================================================
# 2. NETWORK BEHAVIOUR
# ==============================================================================

# FETCH_TIMEOUT: Seconds allowed for a single server attempt
FETCH_TIMEOUT = 30

# SKIP_UNREACHABLE_REPOS: When True, a repository whose servers all fail is
# skipped with a warning instead of aborting the whole run
SKIP_UNREACHABLE_REPOS = False

# ==============================================================================
# 3. DIAGNOSTICS
# ==============================================================================

DEBUG_MODE = False

# LOG_FILE: Optional path of a log file written in addition to stderr
LOG_FILE = None
