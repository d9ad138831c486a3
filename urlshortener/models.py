from dataclasses import dataclass, replace
from typing import Any


# fmt: off
@dataclass(frozen=True)
class UrlRecord:
    slug: str          # Caller-supplied unique identifier (primary key)
    full_url: str      # Absolute target URL the slug redirects to
    created_at: str    # ISO-8601 UTC timestamp, set once at creation
    updated_at: str    # ISO-8601 UTC timestamp, refreshed on every update
# fmt: on

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'UrlRecord':
        """Build a record from its wire/store representation (camelCase keys)."""
        return cls(
            slug=data['slug'],
            full_url=data['fullUrl'],
            created_at=data['createdAt'],
            updated_at=data['updatedAt'],
        )

    def to_dict(self) -> dict[str, str]:
        return {
            'slug': self.slug,
            'fullUrl': self.full_url,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }

    def with_full_url(self, full_url: str, updated_at: str) -> 'UrlRecord':
        """Return a copy pointing at a new target URL, keeping `created_at`."""
        return replace(self, full_url=full_url, updated_at=updated_at)
