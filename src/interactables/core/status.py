from __future__ import annotations

UPDATED_SUCCESSFULLY = "Updated successfully"

_ERROR_PREFIX = "Error: "
_WARNING_PREFIX = "Warning: "


def not_found_status(element_id: str) -> str:
    return f"{_ERROR_PREFIX}Component with ID {element_id} not found"


def no_props_status(element_id: str) -> str:
    return f"{_WARNING_PREFIX}No props provided for component with ID {element_id}"


def is_success(status: str) -> bool:
    return status == UPDATED_SUCCESSFULLY


def is_error(status: str) -> bool:
    return str(status).startswith(_ERROR_PREFIX)


def is_warning(status: str) -> bool:
    return str(status).startswith(_WARNING_PREFIX)
