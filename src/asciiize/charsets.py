from collections.abc import Sequence

# Lower bounds (exclusive) of the brightness buckets, brightest first
BRIGHTNESS_THRESHOLDS = (220, 160, 120, 100, 80, 60, 40)
NUM_BUCKETS = len(BRIGHTNESS_THRESHOLDS) + 1

# Eight symbols per ramp, one per bucket, brightest bucket first.
# Glyphs are drawn in the pixel's own colour, so brighter cells get more ink.
RAMPS = {
    "density": "@#%*+=-.",
    "blocks": "█▇▆▅▄▃▂▁",
    "braille": "⣿⣷⣶⣦⣤⣄⣀⡀",
    "hearts": "❤" * NUM_BUCKETS,
}

DEFAULT_RAMP = "density"


def symbol_for(brightness: float, symbols: Sequence[str] = RAMPS[DEFAULT_RAMP]) -> str:
    """Pick the bucket symbol for a brightness value.

    Values that pass no threshold (negative, NaN) fall into the last bucket.
    """
    for threshold, symbol in zip(BRIGHTNESS_THRESHOLDS, symbols):
        if brightness > threshold:
            return symbol
    return symbols[NUM_BUCKETS - 1]
