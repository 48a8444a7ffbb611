def format_degrees(value: float, positive_label: str, negative_label: str) -> str:
    """Signed degrees -> "12.3456°N" style label with the hemisphere letter."""
    label = positive_label if value >= 0 else negative_label
    return f"{abs(value):.4f}°{label}"
