"""Noise directory classification.

A release on the site usually carries structural subdirectories (samples,
subtitles, proofs, cover art, CD1/CD2 splits). These must never be indexed
as releases of their own, and the scanner does not descend into them.
"""

import re

# Literal fragments matched against the lowercased path with a trailing "/".
NOISE_FRAGMENTS: tuple[str, ...] = (
    "/subs/",
    "/sub/",
    "/sample/",
    "/proof/",
    "/cover/",
    " complete ",
    " incomplete ",
    "imdb",
    # Hidden or incomplete releases start with an underscore
    "/_",
)

# Multi-disc split folders: /cd1, /disc-02, /dvd_1, bare /cd
MULTI_DISC_PATTERN = re.compile(r"/(?:disc|cd|dvd)[-_.]?[0-9]{0,2}")


def is_noise(candidate_path: str) -> bool:
    """Check if a directory path is a structural part of a release.

    Matching is case-insensitive and done on the path with a trailing
    separator appended, so a final ``Sample`` segment matches the
    ``/sample/`` rule the same way an inner one does.

    Args:
        candidate_path: Directory path, absolute or site-relative.

    Returns:
        True if the directory must be neither indexed nor descended into.
    """
    checkme = candidate_path.lower() + "/"

    for fragment in NOISE_FRAGMENTS:
        if fragment in checkme:
            return True

    return MULTI_DISC_PATTERN.search(checkme) is not None
