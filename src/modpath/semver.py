"""Semantic version parsing and canonicalization for module versions.

Versions always carry a leading ``v``. Shorthands such as ``v1`` and ``v1.2``
are well formed and stand for ``v1.0.0`` and ``v1.2.0``; the canonical form
is ``vMAJOR.MINOR.PATCH[-PRERELEASE]`` with build metadata dropped.

Precedence between versions is delegated to ``semantic_version``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

import semantic_version

_NUM = r"(?:0|[1-9][0-9]*)"
_PRERELEASE_IDENT = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

_VERSION_RE = re.compile(
    rf"v(?P<major>{_NUM})"
    rf"(?:\.(?P<minor>{_NUM})"
    rf"(?:\.(?P<patch>{_NUM})"
    rf"(?P<prerelease>-{_PRERELEASE_IDENT}(?:\.{_PRERELEASE_IDENT})*)?"
    rf"(?P<build>\+{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*)?"
    r")?)?"
)


@dataclass(frozen=True)
class ParsedVersion:
    """Components of a well-formed version.

    ``prerelease`` and ``build`` keep their leading ``-`` / ``+``.
    Shorthand inputs have their missing components filled in with "0".
    """
    major: str
    minor: str
    patch: str
    prerelease: str
    build: str

    def canonical(self) -> str:
        """Render the canonical form of this version."""
        return f"v{self.major}.{self.minor}.{self.patch}{self.prerelease}"

    def precedence_key(self) -> tuple:
        """Return a sort key for semantic version precedence.

        Build metadata is left out, so versions differing only in build
        compare equal.
        """
        return semantic_version.Version(
            major=int(self.major),
            minor=int(self.minor),
            patch=int(self.patch),
            prerelease=tuple(self.prerelease[1:].split(".")) if self.prerelease else (),
            build=(),
        ).precedence_key


def parse(v: str) -> Optional[ParsedVersion]:
    """Parse ``v``, returning None when it is not a well-formed version."""
    if not isinstance(v, str):
        return None
    m = _VERSION_RE.fullmatch(v)
    if not m:
        return None
    minor, patch = m.group("minor"), m.group("patch")
    if minor is None:
        minor, patch = "0", "0"
    elif patch is None:
        patch = "0"
    return ParsedVersion(
        major=m.group("major"),
        minor=minor,
        patch=patch,
        prerelease=m.group("prerelease") or "",
        build=m.group("build") or "",
    )


def is_valid(v: str) -> bool:
    """Report whether ``v`` is a well-formed version."""
    return parse(v) is not None


def canonical(v: str) -> str:
    """Return the canonical form of ``v``, or "" when it is not well formed.

    >>> canonical("v1.2")
    'v1.2.0'
    >>> canonical("v1.2.3+build")
    'v1.2.3'
    """
    p = parse(v)
    if p is None:
        return ""
    return p.canonical()


def is_canonical(v: str) -> bool:
    """Report whether ``v`` is well formed and already canonical."""
    return v != "" and canonical(v) == v


def major(v: str) -> str:
    """Return the major prefix ("v2") of ``v``, or "" when invalid."""
    p = parse(v)
    if p is None:
        return ""
    return "v" + p.major


def major_minor(v: str) -> str:
    """Return the "vMAJOR.MINOR" prefix of ``v``, or "" when invalid."""
    p = parse(v)
    if p is None:
        return ""
    return f"v{p.major}.{p.minor}"


def prerelease(v: str) -> str:
    """Return the prerelease suffix of ``v`` including its "-", or ""."""
    p = parse(v)
    if p is None:
        return ""
    return p.prerelease


def build(v: str) -> str:
    """Return the build suffix of ``v`` including its "+", or ""."""
    p = parse(v)
    if p is None:
        return ""
    return p.build


def compare(v: str, w: str) -> int:
    """Compare two versions by precedence, returning -1, 0 or +1.

    Invalid versions sort before all valid ones and compare equal to each
    other. Build metadata does not take part in the comparison.
    """
    pv, pw = parse(v), parse(w)
    if pv is None and pw is None:
        return 0
    if pv is None:
        return -1
    if pw is None:
        return 1
    kv, kw = pv.precedence_key(), pw.precedence_key()
    if kv < kw:
        return -1
    if kw < kv:
        return 1
    return 0


def max_version(v: str, w: str) -> str:
    """Return the greater of two versions, preferring ``v`` on ties."""
    if compare(v, w) < 0:
        return w
    return v
