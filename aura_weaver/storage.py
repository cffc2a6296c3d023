"""
aura_weaver/storage.py
Pinning-service client for artifacts and metadata

Thin wrapper around the Pinata HTTP API. The engine never calls this;
the CLI and other callers do, after generation succeeded.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from .config import PIN_FILE_ENDPOINT, PIN_JSON_ENDPOINT, StorageConfig
from .errors import StorageError
from .models import GenerationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PinResult:
    cid: str
    url: str


@dataclass(frozen=True)
class PinnedGeneration:
    image: PinResult
    metadata: PinResult
    metadata_doc: dict


class PinningClient:
    """
    Uploads bytes and JSON documents to a content-addressed store.

    Args:
        config: Credentials and gateway
        session: Optional requests.Session (tests pass a stub)
    """

    def __init__(self, config: StorageConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._session = session or self._make_session()

    def _make_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        })
        return s

    def _auth_headers(self) -> dict:
        if not self.config.configured:
            raise StorageError(
                "Pinning keys not configured. Set PINATA_API_KEY and PINATA_SECRET_KEY"
            )
        return {
            "pinata_api_key": self.config.api_key,
            "pinata_secret_api_key": self.config.secret_key,
        }

    def _handle(self, response, what: str) -> PinResult:
        if not 200 <= response.status_code < 300:
            logger.error(f"{what} upload failed: HTTP {response.status_code}")
            raise StorageError(f"{what} upload failed: HTTP {response.status_code} {response.reason}")
        try:
            cid = response.json()["IpfsHash"]
        except (ValueError, KeyError) as e:
            raise StorageError(f"{what} upload returned no content id") from e
        logger.info(f"{what} pinned: {cid}")
        return PinResult(cid=cid, url=f"{self.config.gateway}{cid}")

    def pin_file(self, data: bytes, filename: str, content_type: str = "image/png") -> PinResult:
        headers = self._auth_headers()
        try:
            r = self._session.post(
                PIN_FILE_ENDPOINT,
                headers=headers,
                files={"file": (filename, data, content_type)},
                timeout=self.config.timeout_sec,
            )
        except requests.RequestException as e:
            raise StorageError(f"File upload failed: {e}") from e
        return self._handle(r, "File")

    def pin_json(self, document: dict, name: str = "aura-nft-metadata.json") -> PinResult:
        headers = self._auth_headers()
        headers["Content-Type"] = "application/json"
        body = {"pinataContent": document, "pinataMetadata": {"name": name}}
        try:
            r = self._session.post(
                PIN_JSON_ENDPOINT,
                headers=headers,
                data=json.dumps(body),
                timeout=self.config.timeout_sec,
            )
        except requests.RequestException as e:
            raise StorageError(f"Metadata upload failed: {e}") from e
        return self._handle(r, "Metadata")

    def pin_generation(self, result: GenerationResult, metadata: dict,
                       filename: str) -> PinnedGeneration:
        """
        Pin the artifact, point metadata["image"] at it, then pin the metadata.

        The caller's dict is not modified.
        """
        image = self.pin_file(result.artifact, filename)
        doc = dict(metadata)
        doc["image"] = image.url
        meta = self.pin_json(doc)
        return PinnedGeneration(image=image, metadata=meta, metadata_doc=doc)
