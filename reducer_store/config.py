"""Store configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

ReentrantPolicy = Literal["queue", "reject"]


class StoreConfig(BaseModel):
    """
    Per-store settings.

    Attributes:
        name: Name used in logs, error messages and ``@effect`` matching.
        reentrant_dispatch: What to do with a dispatch issued while another
            is still running. ``"queue"`` runs it after the current round,
            ``"reject"`` raises ``ReentrantDispatchError``.
        log_actions: Emit a debug log line for every dispatched action.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    reentrant_dispatch: ReentrantPolicy = "queue"
    log_actions: bool = False
