"""Shared constants for permissions and audit log labels."""

# Capabilities checked by the role-permission guard on admin routes.
MODIFY_THESIS = "MODIFY_THESIS"
VIEW_THESIS = "VIEW_THESIS"
VIEW_HISTORY = "VIEW_HISTORY"

ALL_PERMISSIONS: tuple[str, ...] = (MODIFY_THESIS, VIEW_THESIS, VIEW_HISTORY)

# Action label written to the history table on a successful thesis update.
ACTION_UPDATED_THESIS = "Updated Thesis"

# Range of a signed 64-bit BIGINT primary key.
MIN_BIGINT = -(2**63)
MAX_BIGINT = 2**63 - 1
