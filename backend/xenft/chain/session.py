"""Explicit chain connection session.

A ``ChainSession`` owns the reader (and optional account) for its lifetime:
``connect()`` → active → ``disconnect()``. Nothing is kept in module globals;
pass the session to whatever needs chain reads.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Protocol

from xenft.engine.errors import ChainSessionError
from xenft.models.chain import ChainTokenData

logger = logging.getLogger(__name__)


class ChainReader(Protocol):
    """Read calls against the XENFT contract."""

    def vmu_count(self, token_id: int) -> int: ...

    def mint_info(self, token_id: int) -> int: ...

    def xen_burned(self, token_id: int) -> int: ...

    def is_apex(self, token_id: int) -> bool: ...

    def owned_tokens(self, account: str) -> list[int]: ...


@dataclass
class InMemoryChainReader:
    """Dictionary-backed reader for tests and offline rendering."""

    tokens: dict[int, ChainTokenData] = field(default_factory=dict)
    owners: dict[str, list[int]] = field(default_factory=dict)

    def _token(self, token_id: int) -> ChainTokenData:
        try:
            return self.tokens[token_id]
        except KeyError:
            raise LookupError(f"token {token_id} does not exist") from None

    def vmu_count(self, token_id: int) -> int:
        return self._token(token_id).vmu_count

    def mint_info(self, token_id: int) -> int:
        packed = self._token(token_id).packed_mint_info
        return packed if isinstance(packed, int) else int(packed, 0)

    def xen_burned(self, token_id: int) -> int:
        return self._token(token_id).xen_burned

    def is_apex(self, token_id: int) -> bool:
        return self._token(token_id).is_apex

    def owned_tokens(self, account: str) -> list[int]:
        return list(self.owners.get(account, []))


class SessionState(enum.Enum):
    IDLE = "idle"
    ACTIVE = "active"
    CLOSED = "closed"


class ChainSession:
    """Connection handle passed by reference to whatever needs chain reads."""

    def __init__(
        self,
        reader: ChainReader,
        account: str | None = None,
        chain_id: int | None = None,
    ) -> None:
        from xenft.config import settings

        self._reader = reader
        self.account = account
        self.chain_id = chain_id if chain_id is not None else settings.chain_id
        self.state = SessionState.IDLE

    @property
    def is_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    @property
    def view_only(self) -> bool:
        return self.account is None

    def connect(self) -> ChainSession:
        if self.state is SessionState.CLOSED:
            raise ChainSessionError("session already disconnected; create a new one")
        self.state = SessionState.ACTIVE
        logger.info(
            "Chain session connected (chain %d, %s)",
            self.chain_id,
            "view-only" if self.view_only else f"account {self.account}",
        )
        return self

    def disconnect(self) -> None:
        if self.state is SessionState.ACTIVE:
            logger.info("Chain session disconnected")
        self.state = SessionState.CLOSED

    def __enter__(self) -> ChainSession:
        return self.connect()

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect()

    def _require_active(self) -> ChainReader:
        if not self.is_active:
            raise ChainSessionError(f"session is {self.state.value}, not active")
        return self._reader

    def fetch_token(self, token_id: int) -> ChainTokenData:
        """Read the four per-token values the renderer needs."""
        reader = self._require_active()
        return ChainTokenData(
            vmu_count=reader.vmu_count(token_id),
            packed_mint_info=reader.mint_info(token_id),
            xen_burned=reader.xen_burned(token_id),
            is_apex=reader.is_apex(token_id),
        )

    def owned_tokens(self) -> list[int]:
        reader = self._require_active()
        if self.account is None:
            raise ChainSessionError("view-only session has no account")
        return reader.owned_tokens(self.account)
