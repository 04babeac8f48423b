"""
Accept-header content negotiation.

Picks the offered media type the client prefers, honoring quality
values and range specificity. Ties go to the earlier offer.
"""

from dataclasses import dataclass

WILDCARD = "*"


@dataclass(frozen=True)
class MediaRange:
    """A single entry of an Accept header."""

    type: str
    subtype: str
    quality: float

    @property
    def specificity(self) -> int:
        if self.type == WILDCARD:
            return 0
        if self.subtype == WILDCARD:
            return 1
        return 2

    def matches(self, media_type: str) -> bool:
        offer_type, _, offer_subtype = media_type.partition("/")
        if self.type not in (WILDCARD, offer_type):
            return False
        return self.subtype in (WILDCARD, offer_subtype)


def parse_accept(header: str | None) -> list[MediaRange]:
    """Parse an Accept header. A missing or empty header accepts anything."""
    if not header or not header.strip():
        return [MediaRange(WILDCARD, WILDCARD, 1.0)]

    ranges = []
    for part in header.split(","):
        media, *params = [p.strip() for p in part.split(";")]
        if not media:
            continue
        media_type, _, subtype = media.lower().partition("/")
        quality = 1.0
        for param in params:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        ranges.append(MediaRange(media_type, subtype, quality))
    return ranges


def best_match(offers: list[str], header: str | None) -> str | None:
    """Return the best offer for the Accept header, or None.

    Args:
        offers: Media types the server can produce, in preference order.
        header: The raw Accept header value.

    Returns:
        The chosen offer, or None when nothing acceptable is offered.
    """
    ranges = parse_accept(header)
    best: str | None = None
    best_quality = 0.0

    for offer in offers:
        # A bare token such as "json" is not a media range and matches nothing.
        matching = [r for r in ranges if r.subtype and r.matches(offer.lower())]
        if not matching:
            continue
        quality = max(matching, key=lambda r: r.specificity).quality
        if quality > best_quality:
            best, best_quality = offer, quality
    return best
