"""HTTP client for the translate and synthesize endpoints."""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import urljoin

import requests

from transpeak_core.config import DEFAULT_TIMEOUT

from .models import SynthesisRequest, SynthesisResponse, TranslationRequest, TranslationResponse

LOGGER = logging.getLogger(__name__)


class BackendError(RuntimeError):
    """Raised when a backend call fails for any reason."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class BackendClient:
    """Blocking client for the translation backend.

    Every failure (connection problems, non-2xx statuses, bodies that are not
    the expected JSON) is reported as :class:`BackendError`.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def translate(self, req: TranslationRequest) -> TranslationResponse:
        payload = self._post(
            "translate",
            data={
                "text": req.text,
                "sourceLanguage": req.source_language,
                "targetLanguage": req.target_language,
            },
        )
        return TranslationResponse(translated_text=_require_str(payload, "translatedText"))

    def synthesize(self, req: SynthesisRequest) -> SynthesisResponse:
        payload = self._post("synthesize", data={"text": req.text, "language": req.language})
        return SynthesisResponse(audio_url=_audio_location(payload))

    def speak(self, text: str, lang: str) -> SynthesisResponse:
        """Translate *text* into *lang* and synthesize it in one call."""

        payload = self._post("translate", json={"text": text, "lang": lang})
        return SynthesisResponse(audio_url=_audio_location(payload))

    def audio_url(self, path: str) -> str:
        return urljoin(self.base_url, path)

    def _post(self, endpoint: str, **kwargs: Any) -> Mapping[str, Any]:
        url = urljoin(self.base_url, endpoint)
        LOGGER.debug("POST %s", url)
        try:
            response = self.session.post(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise BackendError(f"Request to {url} failed: {exc}") from exc

        if not response.ok:
            raise BackendError(
                f"{url} answered {response.status_code}: {_error_message(response)}",
                status=response.status_code,
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise BackendError(f"{url} returned a non-JSON body") from exc
        if not isinstance(payload, Mapping):
            raise BackendError(f"{url} returned an unexpected JSON value")
        return payload


def _require_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise BackendError(f"Response is missing {key!r}")
    return value


def _audio_location(payload: Mapping[str, Any]) -> str:
    location = payload.get("audioPath") or payload.get("audioUrl")
    if not isinstance(location, str) or not location:
        raise BackendError("Response is missing the audio location")
    return location


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, Mapping) and isinstance(body.get("error"), Mapping):
        return str(body["error"].get("message", ""))
    return str(body)[:200]


__all__ = ["BackendClient", "BackendError"]
