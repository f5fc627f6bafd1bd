"""Log sampling and message pattern normalization."""

from logsift.sampling.patterns import (
    DEFAULT_RULES,
    NormalizationRule,
    PatternNormalizer,
    normalize_to_pattern,
)
from logsift.sampling.sampler import (
    LogRecord,
    SampleMode,
    SampleResult,
    Sampler,
    diverse_sample,
    plan_fetch_limit,
    select_samples,
    spread_sample,
)

__all__ = [
    "DEFAULT_RULES",
    "NormalizationRule",
    "PatternNormalizer",
    "normalize_to_pattern",
    "LogRecord",
    "SampleMode",
    "SampleResult",
    "Sampler",
    "diverse_sample",
    "plan_fetch_limit",
    "select_samples",
    "spread_sample",
]
