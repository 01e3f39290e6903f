"""Semantic event constants for structured logging.

All log events should use these constants rather than magic strings to ensure
consistency and enable reliable querying and analysis.
"""

# Run lifecycle
RETENTION_RUN_STARTED = "retention_run_started"
RETENTION_RUN_COMPLETED = "retention_run_completed"
RETENTION_RUN_FAILED = "retention_run_failed"
CONFIG_INVALID = "config_invalid"

# Listing and planning
INDICES_LISTED = "indices_listed"
INDEX_SKIPPED = "index_skipped"
INDEX_EVALUATED = "index_evaluated"
INDEX_EXPIRED = "index_expired"
NOTHING_TO_DELETE = "nothing_to_delete"

# Deletion
DRYRUN_WOULD_DELETE = "dryrun_would_delete"
INDEX_DELETED = "index_deleted"
INDEX_ALREADY_ABSENT = "index_already_absent"
INDEX_DELETE_FAILED = "index_delete_failed"

# HTTP
STORE_REQUEST = "store_request"
STORE_REQUEST_FAILED = "store_request_failed"
