"""
Handshake admission gate.

Turns the outcome of the compatibility check into a decision the
connection layer acts on:

- ACCEPT: proceed to an established session.
- REJECT: close the connection. The peer is incompatible.
- FATAL: our own descriptor is malformed. Every peer would be rejected,
  so the node should stop rather than keep dialing.

No decision is ever retried: the inputs are static, so re-running the
check cannot change the outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from .compat import check_compatibility, check_mutual_compatibility
from .descriptor import PeerDescriptor
from .errors import CompatibilityError, VersionFormatError

logger = logging.getLogger(__name__)


class Verdict(Enum):
    """Outcome of the admission gate."""

    ACCEPT = auto()
    REJECT = auto()
    FATAL = auto()


@dataclass(frozen=True, slots=True)
class AdmissionDecision:
    """Verdict plus the error that caused a rejection, if any."""

    verdict: Verdict
    error: CompatibilityError | None = None

    @property
    def accepted(self) -> bool:
        """Check if the peer may proceed."""
        return self.verdict is Verdict.ACCEPT


def admit_peer(
    local: PeerDescriptor,
    remote: PeerDescriptor,
    *,
    mutual: bool = False,
) -> AdmissionDecision:
    """
    Evaluate a peer descriptor received during the handshake.

    Args:
        local: Our own descriptor.
        remote: The descriptor the peer presented.
        mutual: Also apply the peer's channel rule to us.

    Returns:
        The admission decision.
    """
    check = check_mutual_compatibility if mutual else check_compatibility
    try:
        check(local, remote)
    except VersionFormatError as e:
        if e.is_local_fault:
            logger.error("Local descriptor is misconfigured: %s", e)
            return AdmissionDecision(Verdict.FATAL, e)
        logger.info("Rejecting peer %s: %s", remote, e)
        return AdmissionDecision(Verdict.REJECT, e)
    except CompatibilityError as e:
        logger.info("Rejecting peer %s: %s", remote, e)
        return AdmissionDecision(Verdict.REJECT, e)

    logger.debug("Accepted peer %s", remote)
    return AdmissionDecision(Verdict.ACCEPT)
