from __future__ import annotations

# Shot-to-shot samples outside this band are GPS jitter, mis-taps or
# mis-associated fixes. The bounds are inclusive.
MIN_SAMPLE_DISTANCE_M = 10.0
MAX_SAMPLE_DISTANCE_M = 350.0

__all__ = ["MAX_SAMPLE_DISTANCE_M", "MIN_SAMPLE_DISTANCE_M"]
