def ctx_prefix(*, source: object, page_size: int) -> str:
    return f"source={source!r} page_size={page_size}"
