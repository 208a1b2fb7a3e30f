"""Helper modules for the Photo Print Station."""

__all__ = [
    "capabilities",
    "gray_policy",
    "printer_config",
]
