"""Project-wide constant definitions."""

__all__: list[str] = [
    "DEFAULT_FAILURE_RATE",
    "FALLBACK_PAYLOAD",
    "MISSING_INPUT_MESSAGE",
    "PROCESSED_PREFIX",
    "REFERENCE_PAYLOADS",
]

# Service configuration
DEFAULT_FAILURE_RATE: float = 0.01  # 1% nominal failure rate, descriptive only

# Request handling
PROCESSED_PREFIX: str = "Processed: "
FALLBACK_PAYLOAD: str = "Fallback response"
MISSING_INPUT_MESSAGE: str = "No input provided"

# Reference scenario: seven requests, missing at positions 3 and 6
REFERENCE_PAYLOADS: tuple = (
    "req1",
    "req2",
    None,
    "req3",
    "req4",
    None,
    "req5",
)
