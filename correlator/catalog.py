"""
Catalog records and the cross-references the collection views rely on.

Every comparison goes through `are_similar(..., allow_empty=False)`, so a CD
or wantlist entry with a blank artist or title never matches anything.
Scans are plain O(n*m) loops; callers scanning large lists repeatedly should
cache the results themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from .config import config
from .similarity import are_similar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CD:
    id: str
    artist: str
    title: str
    year: Optional[int] = None
    genre: Optional[str] = None
    format: str = "cd"


@dataclass(frozen=True)
class WantlistItem:
    id: str
    artist: str
    title: str
    year: Optional[int] = None
    genre: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class DiscographyAlbum:
    title: str
    year: Union[int, str, None] = None


@dataclass
class ArtistReport:
    """What the collection holds for one artist against its discography."""

    artist: str
    owned: List[CD] = field(default_factory=list)
    missing: List[DiscographyAlbum] = field(default_factory=list)
    wanted: List[DiscographyAlbum] = field(default_factory=list)


def _same_release(
    artist_a: str,
    title_a: str,
    artist_b: str,
    title_b: str,
    artist_threshold: float,
    title_threshold: float,
    scorer: Optional[str],
) -> bool:
    return are_similar(
        artist_a, artist_b, artist_threshold, scorer=scorer, allow_empty=False
    ) and are_similar(title_a, title_b, title_threshold, scorer=scorer, allow_empty=False)


def capitalize_words(text: Optional[str]) -> str:
    """'boards OF canada' -> 'Boards Of Canada'."""
    if not text:
        return ""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def find_potential_duplicate(
    new_cd: CD,
    collection: Iterable[CD],
    threshold: Optional[float] = None,
    scorer: Optional[str] = None,
) -> Optional[CD]:
    """First CD in `collection` whose artist and title both match `new_cd`."""
    if threshold is None:
        threshold = config["DUPLICATE_THRESHOLD"]
    for existing in collection:
        if _same_release(
            new_cd.artist, new_cd.title, existing.artist, existing.title, threshold, threshold, scorer
        ):
            return existing
    return None


def find_duplicate_groups(
    cds: Sequence[CD],
    threshold: Optional[float] = None,
    scorer: Optional[str] = None,
) -> List[List[CD]]:
    """Group CDs that look like the same release.

    Greedy and order-dependent: each CD seeds a group with every later,
    still-ungrouped CD matching it. A CD lands in at most one group and
    single-member groups are dropped.
    """
    if threshold is None:
        threshold = config["DUPLICATE_THRESHOLD"]
    grouped = set()
    groups: List[List[CD]] = []
    for i, first in enumerate(cds):
        if i in grouped:
            continue
        current = [first]
        members = [i]
        for j in range(i + 1, len(cds)):
            if j in grouped:
                continue
            other = cds[j]
            if _same_release(
                first.artist, first.title, other.artist, other.title, threshold, threshold, scorer
            ):
                current.append(other)
                members.append(j)
        if len(current) > 1:
            groups.append(current)
            grouped.update(members)
    logger.debug("Duplicate scan over %d CDs found %d group(s)", len(cds), len(groups))
    return groups


def albums_by_artist(
    cds: Iterable[CD],
    artist_name: str,
    threshold: Optional[float] = None,
    scorer: Optional[str] = None,
) -> List[CD]:
    """CDs credited to `artist_name`, oldest first (unknown year first)."""
    if threshold is None:
        threshold = config["ARTIST_THRESHOLD"]
    matches = [
        cd
        for cd in cds
        if are_similar(cd.artist, artist_name, threshold, scorer=scorer, allow_empty=False)
    ]
    return sorted(matches, key=lambda cd: cd.year or 0)


def is_on_wantlist(
    album: DiscographyAlbum,
    artist_name: str,
    wantlist: Iterable[WantlistItem],
    artist_threshold: Optional[float] = None,
    title_threshold: Optional[float] = None,
    scorer: Optional[str] = None,
) -> bool:
    """True when some wantlist entry already names this discography album."""
    if artist_threshold is None:
        artist_threshold = config["ARTIST_THRESHOLD"]
    if title_threshold is None:
        title_threshold = config["TITLE_THRESHOLD"]
    return any(
        _same_release(
            item.artist, item.title, artist_name, album.title, artist_threshold, title_threshold, scorer
        )
        for item in wantlist
    )


def is_owned(
    item: WantlistItem,
    collection: Iterable[CD],
    artist_threshold: Optional[float] = None,
    title_threshold: Optional[float] = None,
    scorer: Optional[str] = None,
) -> Optional[CD]:
    """The owned CD that satisfies wantlist entry `item`, if any."""
    if artist_threshold is None:
        artist_threshold = config["ARTIST_THRESHOLD"]
    if title_threshold is None:
        title_threshold = config["TITLE_THRESHOLD"]
    for cd in collection:
        if _same_release(
            item.artist, item.title, cd.artist, cd.title, artist_threshold, title_threshold, scorer
        ):
            return cd
    return None


def missing_albums(
    artist_name: str,
    discography: Iterable[DiscographyAlbum],
    collection: Iterable[CD],
    artist_threshold: Optional[float] = None,
    title_threshold: Optional[float] = None,
    scorer: Optional[str] = None,
) -> List[DiscographyAlbum]:
    """Discography albums of `artist_name` with no owned counterpart."""
    if title_threshold is None:
        title_threshold = config["TITLE_THRESHOLD"]
    owned = albums_by_artist(collection, artist_name, artist_threshold, scorer=scorer)
    return [
        album
        for album in discography
        if not any(
            are_similar(cd.title, album.title, title_threshold, scorer=scorer, allow_empty=False)
            for cd in owned
        )
    ]


def artist_report(
    artist_name: str,
    discography: Iterable[DiscographyAlbum],
    collection: Iterable[CD],
    wantlist: Iterable[WantlistItem],
    artist_threshold: Optional[float] = None,
    title_threshold: Optional[float] = None,
    scorer: Optional[str] = None,
) -> ArtistReport:
    """Owned CDs, missing albums and the missing ones already wanted."""
    collection = list(collection)
    wantlist = list(wantlist)
    owned = albums_by_artist(collection, artist_name, artist_threshold, scorer=scorer)
    missing = missing_albums(
        artist_name, discography, owned, artist_threshold, title_threshold, scorer=scorer
    )
    wanted = [
        album
        for album in missing
        if is_on_wantlist(album, artist_name, wantlist, artist_threshold, title_threshold, scorer=scorer)
    ]
    logger.debug(
        "%s: %d owned, %d missing, %d of them wanted",
        artist_name,
        len(owned),
        len(missing),
        len(wanted),
    )
    return ArtistReport(artist=artist_name, owned=owned, missing=missing, wanted=wanted)
