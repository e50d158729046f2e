"""Constants for the benchmarking system."""


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    DEFAULT_SAMPLES = 5
    DEFAULT_TIMEOUT_MS = 5000
    SAMPLE_DELAY_MS = 100  # pacing between samples to stay under provider rate limits
    PERCENTILE = 95
    ROUND_DIGITS = 2
    MISSING_HEIGHT_DELAY = 999
    MAX_ALTERNATIVES = 3

    # Scoring weights, must sum to 1
    LATENCY_WEIGHT = 0.35
    SUCCESS_WEIGHT = 0.35
    BLOCK_DELAY_WEIGHT = 0.20
    CONSISTENCY_WEIGHT = 0.10

    LATENCY_DIVISOR = 5  # avg latency of 500ms scores zero
    BLOCK_DELAY_PENALTY = 10  # per block behind
    CONSISTENCY_DIVISOR = 5  # latency spread of 500ms scores zero
    MIN_SCORE = 0
    MAX_SCORE = 100
