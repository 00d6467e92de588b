"""Extraction of file names from diff header lines."""

import logging
import re

from split_diffs.models import FileNamePair

logger = logging.getLogger(__name__)

OLD_FILE_PREFIX = "--- a/"
NEW_FILE_PREFIX = "+++ b/"
RENAME_FROM_PREFIX = "rename from "
RENAME_TO_PREFIX = "rename to "
BINARY_FILES_PREFIX = "Binary files"

# Printed as "Binary files (a/<name>|/dev/null) and (b/<name>|/dev/null) differ".
# Spaces in names are not escaped, so " and " may also appear inside a path.
BINARY_FILES_DIFF_REGEX = re.compile(
    r"^Binary files (?:a/(.*)|/dev/null) and (?:b/(.*)|/dev/null) differ$"
)


class FileHeaderTracker:
    """Collects the old and new file names of the current diff section."""

    def __init__(self, file_names: FileNamePair | None = None):
        self.file_names = file_names if file_names is not None else FileNamePair()

    def reset(self) -> None:
        self.file_names.reset()

    def feed(self, line: str) -> None:
        """Record any file name carried by a diff header line."""
        names = self.file_names
        if line.startswith(OLD_FILE_PREFIX):
            names.file_name_a = line[len(OLD_FILE_PREFIX):]
        elif line.startswith(NEW_FILE_PREFIX):
            names.file_name_b = line[len(NEW_FILE_PREFIX):]
        elif line.startswith(RENAME_FROM_PREFIX):
            names.file_name_a = line[len(RENAME_FROM_PREFIX):]
        elif line.startswith(RENAME_TO_PREFIX):
            names.file_name_b = line[len(RENAME_TO_PREFIX):]
        elif line.startswith(BINARY_FILES_PREFIX):
            match = BINARY_FILES_DIFF_REGEX.match(line)
            if match is None:
                logger.warning("Could not extract file names from %r", line)
                return
            names.file_name_a = match.group(1) or ""
            names.file_name_b = match.group(2) or ""
        else:
            logger.debug("Ignoring diff header line %r", line)
