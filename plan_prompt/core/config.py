from __future__ import annotations


# File name looked up by the locator in a directory or the working directory.
PLAN_FILE_NAME = "plan.yaml"

# Used when a plan omits project.language. Kept as-is for compatibility with
# existing plan files.
DEFAULT_LANGUAGE = "haskell"
