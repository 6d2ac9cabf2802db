# backend/src/campuslife/utils/validators.py
import math


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def safe_float(x, default: float = 0.0) -> float:
    try:
        value = float(x)
    except Exception:
        return default
    return default if math.isnan(value) else value
