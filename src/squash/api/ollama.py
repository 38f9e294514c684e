"""HTTP client for the Ollama model server.

Every operation is one blocking request against `<address>/api/...`:
- POST /api/generate   generate, load_model
- POST /api/chat       chat
- POST /api/create     create_model
- POST /api/tags       list_models
- POST /api/show       show_model_info
- POST /api/copy       copy_model
- DELETE /api/delete   delete_model
- POST /api/pull       pull_model
- POST /api/push       push_model
- POST /api/embeddings generate_embeddings
"""
from __future__ import annotations
import json
import logging
from typing import Any

import httpx

from squash.common.exceptions import OllamaEndpointError
from squash.common.schema import GenerateRequest, GenerateResponse

LOGGER = logging.getLogger("squash.api.ollama")

MAX_REDIRECTS = 10


class OllamaClient:
    """Stateless Ollama API wrapper.

    A new httpx.Client is opened for each call, so one instance can be shared
    between threads.
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.timeout,
            transport=self.transport,
            headers={"Content-Type": "application/json"},
        )

    def _send(self, method: str, url: str, body: dict[str, Any]) -> httpx.Response:
        """Send one request, following redirects with the same method and body."""
        LOGGER.debug("%s %s", method, url)
        content = json.dumps(body)
        with self._client() as client:
            response = client.request(method, url, content=content)
            for _ in range(MAX_REDIRECTS):
                if response.next_request is None:
                    return response
                target = response.next_request.url
                LOGGER.debug("Redirected to %s", target)
                response = client.request(method, target, content=content)
            if response.next_request is not None:
                raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=response.request)
            return response

    def _request_json(self, method: str, url: str, body: dict[str, Any]) -> Any:
        """Issue the request and decode the reply, raising OllamaEndpointError if it can't be."""
        try:
            response = self._send(method, url, body)
        except httpx.HTTPError as e:
            LOGGER.warning("Ollama request to %s failed: %s", url, e)
            raise OllamaEndpointError(str(e)) from e
        try:
            data = response.json()
        except ValueError as e:
            LOGGER.warning("Ollama reply from %s is not JSON (HTTP %s)", url, response.status_code)
            raise OllamaEndpointError(str(e)) from e
        if data is None:
            raise OllamaEndpointError("empty reply")
        return data

    def _request_object(self, method: str, url: str, body: dict[str, Any]) -> dict[str, Any]:
        data = self._request_json(method, url, body)
        if not isinstance(data, dict):
            raise OllamaEndpointError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def _request_status(self, method: str, url: str, body: dict[str, Any]) -> bool:
        """True when the server answers HTTP 200; the reply body is ignored."""
        try:
            response = self._send(method, url, body)
        except httpx.HTTPError as e:
            LOGGER.warning("Ollama request to %s failed: %s", url, e)
            return False
        return response.status_code == 200

    @staticmethod
    def _record(data: dict[str, Any], response: str | None = None) -> GenerateResponse:
        try:
            return GenerateResponse.from_reply(data, response=response)
        except (TypeError, ValueError) as e:
            LOGGER.warning("Ollama reply has unexpected field types: %s", e)
            raise OllamaEndpointError(str(e)) from e

    @staticmethod
    def _succeeded(data: Any) -> bool:
        return isinstance(data, dict) and data.get("status") == "success"

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """
        Generate a completion.

        Args:
            request: Prompt, model and optional generation fields.

        Returns:
            Decoded response record.
        """
        body = {**request.to_payload(), "stream": False}
        data = self._request_object("POST", f"{request.base_url()}/api/generate", body)
        return self._record(data)

    def load_model(self, model: str, address: str) -> bool:
        """Load a model into memory; True once the server reports `done`."""
        address = address.rstrip("/")
        data = self._request_object("POST", f"{address}/api/generate", {"model": model})
        return bool(data.get("done", False))

    def chat(
        self,
        model: str,
        address: str,
        messages: list[dict[str, Any]],
        format: str | None = None,
        options: dict[str, Any] | None = None,
        keep_alive: str | None = None,
    ) -> GenerateResponse:
        """
        Send a chat conversation.

        Args:
            model: Model name.
            address: Base URL of the server.
            messages: Chat history as role/content dicts.
            format: Output format hint, e.g. "json".
            options: Extra top-level body keys, merged after the defaults.
            keep_alive: How long the server keeps the model loaded.

        Returns:
            Response record whose `response` is the JSON-encoded reply message.
        """
        address = address.rstrip("/")
        body: dict[str, Any] = {"model": model, "messages": messages, "stream": False}
        body.update(options or {})
        if format is not None:
            body["format"] = format
        if keep_alive is not None:
            body["keep_alive"] = keep_alive
        data = self._request_object("POST", f"{address}/api/chat", body)
        message = json.dumps(data["message"]) if "message" in data else ""
        return self._record(data, response=message)

    def create_model(self, address: str, name: str, modelfile: str, path: str | None = None) -> bool:
        address = address.rstrip("/")
        body: dict[str, Any] = {"name": name, "modelfile": modelfile, "stream": False}
        if path is not None:
            body["path"] = path
        return self._succeeded(self._request_json("POST", f"{address}/api/create", body))

    def list_models(self, address: str) -> Any:
        """Return the parsed /api/tags reply as-is."""
        address = address.rstrip("/")
        return self._request_json("POST", f"{address}/api/tags", {})

    def show_model_info(self, address: str, model: str) -> Any:
        """Return the parsed /api/show reply as-is."""
        address = address.rstrip("/")
        return self._request_json("POST", f"{address}/api/show", {"name": model})

    def copy_model(self, address: str, source: str, destination: str) -> bool:
        address = address.rstrip("/")
        body = {"source": source, "destination": destination}
        return self._request_status("POST", f"{address}/api/copy", body)

    def delete_model(self, address: str, name: str) -> bool:
        address = address.rstrip("/")
        return self._request_status("DELETE", f"{address}/api/delete", {"name": name})

    def pull_model(self, address: str, name: str, insecure: bool | None = None) -> bool:
        address = address.rstrip("/")
        body: dict[str, Any] = {"name": name, "stream": False}
        if insecure is not None:
            body["insecure"] = insecure
        return self._succeeded(self._request_json("POST", f"{address}/api/pull", body))

    def push_model(self, address: str, name: str, insecure: bool | None = None) -> bool:
        address = address.rstrip("/")
        body: dict[str, Any] = {"name": name, "stream": False}
        if insecure is not None:
            body["insecure"] = insecure
        return self._succeeded(self._request_json("POST", f"{address}/api/push", body))

    def generate_embeddings(
        self,
        address: str,
        model: str,
        prompt: str,
        options: dict[str, Any] | None = None,
        keep_alive: str | None = None,
    ) -> Any:
        """Return the parsed /api/embeddings reply as-is."""
        address = address.rstrip("/")
        body: dict[str, Any] = {"model": model, "prompt": prompt}
        if keep_alive is not None:
            body["keep_alive"] = keep_alive
        if options is not None:
            body["options"] = options
        return self._request_json("POST", f"{address}/api/embeddings", body)
