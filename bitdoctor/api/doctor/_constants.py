"""Constants for the doctor diagnoses (private)."""

import os

# Directory pair under which Bit links installed components
MARKER_PARTS = ("node_modules", "@bit")
MARKER = os.path.join(*MARKER_PARTS)

# Glob patterns matched against paths relative to the scan root; the scope
# directory itself is a candidate as well as everything below it
CANDIDATE_PATTERNS = (
    "/".join(MARKER_PARTS),
    "*/" + "/".join(MARKER_PARTS),
    "/".join(MARKER_PARTS) + "/*",
    "*/" + "/".join(MARKER_PARTS) + "/*",
)

BROKEN_SYMLINKS_NAME = "Check invalid link files"
BROKEN_SYMLINKS_DESCRIPTION = "Validate Bit generated symlink files within environment directory"
BROKEN_SYMLINKS_CATEGORY = "bit-core-files"

SYMPTOMS_HEADER = "the following symlink files point to non-exist paths"
MANUAL_REMEDY_HEADER = "please delete the following paths:"
