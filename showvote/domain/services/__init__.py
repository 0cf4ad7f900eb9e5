"""Domain services for Show Vote."""

from showvote.domain.services.slate_drawer import SlateDrawer

__all__: list[str] = ["SlateDrawer"]
