"""Shared constants for alts directories and record files."""

ALTS_HOME_EXT = ".alts"  # user-level state/config directory suffix

DEFAULT_REGISTRY_DIR = "/etc/alternatives"
DEFAULT_LINK_DIR = "/usr/local/bin"

RECORD_SUFFIX = ".json"
BACKUP_SUFFIX = ".old"  # appended to a record name during commit

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
