"""Faultline CLI Design Standards.

Visual standards for the simulation output: colour palette, layout and the
small set of symbols used to mark request outcomes.
"""

# Colour palette
COLORS = {
    'primary': '#3B82F6',          # Headers, section titles (bright blue)
    'success': '#10B981',          # Processed requests, healthy availability (green)
    'warning': '#F59E0B',          # Degraded requests, fallback responses (yellow)
    'error': '#EF4444',            # Crashes, dropped requests (red)
    'info': '#06B6D4',             # Metrics and metadata (cyan)
    'muted': '#6B7280',            # Secondary text (gray)
    'accent': '#8B5CF6',           # Key values (purple)
}

LAYOUT = {
    'terminal_width': 100,
    'panel_padding': (0, 1),
    'policy_column_width': 12,
}

# Only these symbols are used in output
SYMBOLS = {
    'pass': '✓',
    'fail': '✗',
    'right': '→',

    'warning_text': 'ATTENTION',
    'info_text': 'INFO',
    'crash_text': 'CRASHED',
    'degraded_text': 'DEGRADED',
    'dropped_text': 'DROPPED',
}

# Availability thresholds mapped to styles, checked top-down
AVAILABILITY_STYLES = [
    (99.0, 'success'),
    (70.0, 'warning'),
    (0.0, 'error'),
]

# Style per policy for headers and table rows
POLICY_STYLES = {
    'unsafe': 'error',
    'safe': 'success',
    'resilient': 'warning',
}
