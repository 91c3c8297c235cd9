"""Faultline CLI Message Templates.

Narrative text shown around the simulations and the formatting helpers used
to print their metrics.
"""

# Command-specific messaging templates
COMMAND_MESSAGES = {
    'simulate': {
        'header': "Simulating Production Load: {policy}",
        'starting': "Driving {total} requests ({missing} missing) through {count} policy design(s)",
        'results': "Results: {successful} successful, {failed} failed",
        'uptime': "Service uptime: {duration}",
        'availability': "Availability: {availability}",
        'crash': "Total system failure at request {index}. Remaining {remaining} requests dropped.",
        'saved': "Report written to {path}",
    },
    'validate': {
        'parsed': "Sequence '{name}' parsed: {total} requests, {missing} missing",
        'failure_rate': "Nominal failure rate: {failure_rate}",
    },
}

# Policy descriptions shown in report panels and the comparison table
POLICY_MESSAGES = {
    'unsafe': "Design A: fail-fast with unwrap. One failure brings down the entire service.",
    'safe': "Design B: graceful degradation. Failures are contained and logged, service continues.",
    'resilient': "Design C: fallback response. The service stays up and serves degraded answers.",
}

# The cascade effect of an unchecked unwrap
CASCADE_MESSAGES = [
    "Immediately terminates the current function",
    "Unwinds the stack (unless caught)",
    "Propagates up the call chain",
    "Can crash the entire program",
]

# Closing lessons printed by the demo command
LESSON_MESSAGES = {
    'language': ("LANGUAGE: Result and Option types exist",
                 "The tools for safety were available"),
    'design': ("DESIGN: unwrap was chosen in critical paths",
               "Recoverable errors were converted into unrecoverable crashes"),
    'statistics': ("STATISTICS: given a failure rate and time, failures are inevitable",
                   "Runtime is the real test: plan for the unexpected"),
    'testing': ("TESTING: runtime behaviour differs from test environments",
                "Edge cases, load patterns and timing create unique failure modes"),
    'responsibility': ("RESPONSIBILITY: the bug is in the design, not the language",
                       "unwrap says 'this will never fail'; use it sparingly and with intention"),
}

TAKEAWAYS = [
    "Return errors as values and propagate them explicitly",
    "Design for graceful degradation",
    "Count degraded answers as failures in your availability metrics",
    "Contain faults at the request boundary so one request cannot take down the rest",
]


# Message formatting helpers
def format_percentage(value: float) -> str:
    """Format percentage with one decimal place."""
    return f"{value:.1f}%"

def format_duration(seconds: float) -> str:
    """Format duration in human-readable format."""
    if seconds >= 60:
        return f"{seconds/60:.1f}m"
    elif seconds >= 1:
        return f"{seconds:.2f}s"
    elif seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    else:
        return f"{seconds*1_000_000:.1f}µs"

def format_failure_rate(rate: float) -> str:
    """Format a nominal failure rate as lambda plus percentage."""
    return f"λ = {rate:g} ({rate*100:g}%)"
