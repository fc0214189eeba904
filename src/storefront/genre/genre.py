"""Genre aggregate — the shelf a book sits on."""

from datetime import datetime

from protean.fields import DateTime, String

from storefront.domain import storefront


@storefront.aggregate
class Genre:
    name = String(required=True, max_length=100)
    created_at = DateTime(default=datetime.now)

    @classmethod
    def create(cls, name):
        return cls(name=name.strip(), created_at=datetime.now())
