# 📄 File: garden_care/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A collection of helpful tools other parts of the core use for logging, checking input and
# small text chores.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package: structured logging, validators and helper functions.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - validators: Input validation functions
# - helpers: General purpose helper functions

# 🔄 Connected Modules / Calls From:
# Used by: All garden care modules

from .logging import get_logger, log_context, setup_logging

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
]
