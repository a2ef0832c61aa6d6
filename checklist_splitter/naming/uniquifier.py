def uniquify(candidate: str, used: set[str]) -> str:
    """Return a name not yet in ``used`` and record it there.

    Collisions get `` (2)``, `` (3)``... inserted before the last extension,
    e.g. ``"X - VOID BMD WORKS.pdf"`` -> ``"X - VOID BMD WORKS (2).pdf"``.
    """
    if candidate not in used:
        used.add(candidate)
        return candidate

    dot = candidate.rfind(".")
    if dot >= 0:
        base, ext = candidate[:dot], candidate[dot:]
    else:
        base, ext = candidate, ""

    index = 2
    while f"{base} ({index}){ext}" in used:
        index += 1
    unique = f"{base} ({index}){ext}"
    used.add(unique)
    return unique
