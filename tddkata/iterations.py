"""String repetition."""


def repeat(char: str, times: int) -> str:
    """Return ``char`` repeated ``times`` times; non-positive counts give ''."""
    return char * max(times, 0)