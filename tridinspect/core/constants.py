#!/usr/bin/env python3
"""
tridinspect Core Constants - TrID invocation and output grammar

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# TrID Command Line
# =============================================================================
VERBOSE_FLAG = "-v"
MATCHES_FLAG_PREFIX = "-n:"  # -n:<number of matches>
DEFINITIONS_FLAG_PREFIX = "-d:"  # -d:<definitions package>

# =============================================================================
# Process Execution
# =============================================================================
OUTPUT_ENCODING = "utf-8"
KILL_GRACE_SECONDS = 1.0  # Max wait for killed processes, and again for the pipe drain

# =============================================================================
# Report Detail Keys -> MatchRecord fields
# =============================================================================
DETAIL_FIELDS = {
    "Mime type": "mime_type",
    "Related URL": "related_url",
    "Definition": "definition",
    "Remarks": "remarks",
}
