# src/decayengine/helpers.py

def validate_positive(name: str, x: float) -> None:
    """Raise ValueError unless x > 0 (also rejects NaN)."""
    if not (x > 0):
        raise ValueError(f"{name} must be > 0 (got {x}).")
