"""
AUR RPC client
Looks up package metadata through the AUR RPC interface (type=info).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, Optional

import requests

from raur import config as defaults
from raur.errors import MetadataError


@dataclass(frozen=True)
class PackageInfo:
    """Normalized metadata record for one AUR package"""
    name: str
    version: str
    description: Optional[str] = None

    @classmethod
    def from_rpc(cls, record: Dict[str, Any]) -> "PackageInfo":
        """Build from an RPC result record (capitalized wire field names)"""
        try:
            name = record['Name']
            version = record['Version']
            description = record.get('Description')
        except (KeyError, TypeError, AttributeError) as e:
            raise MetadataError(f"Malformed AUR package record: {record!r}") from e

        if not isinstance(name, str) or not name or not isinstance(version, str):
            raise MetadataError(f"Malformed AUR package record: {record!r}")
        if description is not None and not isinstance(description, str):
            raise MetadataError(f"Malformed AUR package record: {record!r}")

        return cls(name=name, version=version, description=description)


class AURClient:
    """Synchronous AUR metadata lookups"""

    def __init__(self, config: Dict[str, Any], logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.aur_url = config.get('aur_url', defaults.AUR_URL)
        self.timeout = config.get('request_timeout', defaults.REQUEST_TIMEOUT)

    @property
    def rpc_url(self) -> str:
        return f"{self.aur_url}/rpc/"

    def info(self, pkg_name: str) -> Optional[PackageInfo]:
        """
        Query AUR for a single package by exact name

        Args:
            pkg_name: Package name

        Returns:
            PackageInfo for the first result, or None if AUR has no such package

        Raises:
            MetadataError: Request failed or the response could not be understood
        """
        params = {'v': defaults.AUR_RPC_VERSION, 'type': 'info', 'arg': pkg_name}
        self.logger.debug(f"GET {self.rpc_url} {params}")

        try:
            response = requests.get(self.rpc_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise MetadataError(f"Failed to query AUR: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise MetadataError(f"Failed to parse AUR JSON: {e}") from e

        return self._parse_response(data)

    def _parse_response(self, data: Any) -> Optional[PackageInfo]:
        """Validate the RPC envelope and pick the first result"""
        if not isinstance(data, dict):
            raise MetadataError("Failed to parse AUR JSON: response is not an object")

        if data.get('type') == 'error':
            raise MetadataError(f"AUR RPC error: {data.get('error', 'unknown error')}")

        try:
            resultcount = int(data['resultcount'])
            results = data['results']
        except (KeyError, TypeError, ValueError) as e:
            raise MetadataError("Failed to parse AUR JSON: missing resultcount/results") from e

        if resultcount == 0:
            return None

        if not isinstance(results, list) or not results:
            raise MetadataError(f"AUR reported {resultcount} results but returned none")

        return PackageInfo.from_rpc(results[0])
