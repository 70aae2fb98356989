"""Installation status reporter adapter backed by the logging module."""

from __future__ import annotations

import logging

from mdn_lsp.domain.binary import InstallationStatus

logger = logging.getLogger(__name__)


class LoggingStatusReporter:
    """Reports installation status changes as log records.

    Keeps the last status per server so callers (e.g. the CLI) can query it.
    """

    def __init__(self) -> None:
        self._statuses: dict[str, InstallationStatus] = {}

    def set_status(
        self,
        server_id: str,
        status: InstallationStatus,
        message: str | None = None,
    ) -> None:
        self._statuses[server_id] = status
        if status is InstallationStatus.FAILED:
            logger.error(f"{server_id}: installation failed: {message}")
        elif status is InstallationStatus.NONE:
            logger.debug(f"{server_id}: installation status cleared")
        else:
            logger.info(f"{server_id}: {status.value.replace('_', ' ')}")

    def status(self, server_id: str) -> InstallationStatus:
        """Return the last reported status, NONE if never reported."""
        return self._statuses.get(server_id, InstallationStatus.NONE)
