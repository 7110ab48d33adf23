# src/report_kit/observability/names.py

"""Standard metric names for report-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
REPORT_PARSE_DURATION = "report_parse_duration"

# Counters
REPORT_PARSE_REQUESTS_TOTAL = "report_parse_requests_total"
# Labelled with the block kind ("heading", "paragraph", "list", ...)
REPORT_BLOCKS_EMITTED_TOTAL = "report_blocks_emitted_total"

# Gauges
REPORT_PARSE_LINE_COUNT = "report_parse_line_count"


# ============================================================================
# Assembler Metrics
# ============================================================================

# Duration
REPORT_ASSEMBLE_DURATION = "report_assemble_duration"

# Counters (labelled with the output format)
REPORT_ASSEMBLE_REQUESTS_TOTAL = "report_assemble_requests_total"
