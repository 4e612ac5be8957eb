"""
Peer compatibility CLI entry point.

Evaluate a remote peer descriptor against a local one, exactly as the
handshake would, and report the decision.

Usage::

    python -m overlay_spec --local node.yaml --remote peer.yaml
    python -m overlay_spec --local node.yaml --remote peer.yaml --mutual -v

Options:
    --local      Local descriptor or node configuration YAML (required)
    --remote     Remote peer descriptor YAML (required)
    --mutual     Also apply the remote's channel rule to the local descriptor

A local file without an `identityKey` is read as a node configuration and
given an ephemeral identity key. Unquoted numeric values are read as text,
so `version: 1.2` is rejected by the version rule rather than the loader.

Exit status is 0 when the peer is accepted, 1 when it is rejected and 2
when the local descriptor is misconfigured.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from overlay_spec.subspecs.networking.node_info import (
    AdmissionDecision,
    IdentityKeypair,
    LocalNodeConfig,
    PeerDescriptor,
    Verdict,
    admit_peer,
)

logger = logging.getLogger(__name__)

EXIT_CODES: dict[Verdict, int] = {
    Verdict.ACCEPT: 0,
    Verdict.REJECT: 1,
    Verdict.FATAL: 2,
}
"""Process exit status for each admission verdict."""


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter that tints each line by severity."""

    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[2m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
    }

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return line
        return f"{color}{line}{self.RESET}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Send log records to stderr, colored unless `no_color` is set."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    formatter_class = logging.Formatter if no_color else ColoredFormatter
    handler.setFormatter(formatter_class(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def load_local_descriptor(path: Path) -> PeerDescriptor:
    """
    Load the local descriptor.

    Files carrying an `identityKey` are full descriptors. Anything else is a
    `LocalNodeConfig`, completed with a freshly generated identity key.

    Raises:
        pydantic.ValidationError: If the file does not match either shape.
    """
    with path.open() as f:
        data = yaml.safe_load(f) or {}

    if "identityKey" in data or "identity_key" in data:
        return PeerDescriptor.model_validate(data, strict=False)

    config = LocalNodeConfig.model_validate(data, strict=False)
    keypair = IdentityKeypair.generate()
    logger.debug("No identity key configured, using ephemeral key %s", keypair.identity_key().hex())
    return config.to_descriptor(keypair.identity_key())


def run_check(local_path: Path, remote_path: Path, mutual: bool = False) -> AdmissionDecision:
    """
    Load both descriptors and run the admission gate.

    Args:
        local_path: Local descriptor or node configuration YAML.
        remote_path: Remote descriptor YAML.
        mutual: Check compatibility in both directions.

    Returns:
        The admission decision.
    """
    local = load_local_descriptor(local_path)
    remote = PeerDescriptor.from_yaml_file(remote_path)

    logger.info("Local:  %s", local)
    logger.info("Remote: %s", remote)

    return admit_peer(local, remote, mutual=mutual)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Peer descriptor compatibility check",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--local",
        required=True,
        type=Path,
        help="Local descriptor or node configuration YAML",
    )
    parser.add_argument(
        "--remote",
        required=True,
        type=Path,
        help="Remote peer descriptor YAML",
    )
    parser.add_argument(
        "--mutual",
        action="store_true",
        help="Also apply the remote's channel rule to the local descriptor",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    decision = run_check(args.local, args.remote, args.mutual)
    if decision.accepted:
        logger.info("Peer accepted")
    else:
        logger.info("Peer %s: %s", decision.verdict.name.lower(), decision.error)
    return EXIT_CODES[decision.verdict]


if __name__ == "__main__":
    sys.exit(main())
