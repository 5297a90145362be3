def encodable_text(v):
    """Reject strings that cannot be stored as UTF-8, e.g. lone surrogates."""
    if isinstance(v, str):
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text")
    return v
