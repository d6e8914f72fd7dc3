from app.shared.errors import ValidationError

def require_text(value: str | None, field: str) -> str:
    """Trimmed value, or ValidationError when empty / whitespace-only."""
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field} is required")
    return text

def optional_text(value: str | None) -> str | None:
    text = (value or "").strip()
    return text or None
