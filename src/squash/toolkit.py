"""Facade wiring every helper behind one object.

Each collaborator is a constructor argument, so alternative implementations
(another converter, a seeded UUID source, a client with a timeout) can be
swapped in without touching callers. `Squash.create()` builds the defaults.
"""
from __future__ import annotations
from typing import Any

from squash.api.fetch import fetch_json
from squash.api.ollama import OllamaClient
from squash.api.webhook import WebhookClient
from squash.common.generators import Crypto, Milliseconds, Uuid4
from squash.common.schema import Unit
from squash.conversion.converter import BiByteConverter, ByteConverter, Converter
from squash.number.calculator import Calculator
from squash.number.formatter import Formatter


class Squash:
    def __init__(
        self,
        byte_converter: Converter,
        bibyte_converter: Converter,
        random_generator: Crypto,
        uuid: Uuid4,
        timer: Milliseconds,
        number_formatter: Formatter,
        calculator: Calculator,
        ollama_endpoint: OllamaClient,
        webhook_endpoint: WebhookClient,
    ) -> None:
        self.byte_converter = byte_converter
        self.bibyte_converter = bibyte_converter
        self.random_generator = random_generator
        self._uuid = uuid
        self.timer = timer
        self.number_formatter = number_formatter
        self.calculator = calculator
        self.ollama_endpoint = ollama_endpoint
        self.webhook_endpoint = webhook_endpoint

    @classmethod
    def create(cls, timeout: float | None = None) -> "Squash":
        return cls(
            ByteConverter(),
            BiByteConverter(),
            Crypto(),
            Uuid4(),
            Milliseconds(),
            Formatter(),
            Calculator(),
            OllamaClient(timeout=timeout),
            WebhookClient(timeout=timeout),
        )

    def uuid(self) -> str:
        return self._uuid.generate_uuid()

    def generate_random_string(self, length: int = 25) -> str:
        return self.random_generator.generate_string(length)

    def fetch_json(self, url: str) -> Any:
        return fetch_json(url, timeout=self.ollama_endpoint.timeout)

    def convert_bytes(self, unit: Unit, to: str) -> Unit:
        return self.byte_converter.source(unit).target(to).convert()

    def convert_bibytes(self, unit: Unit, to: str) -> Unit:
        return self.bibyte_converter.source(unit).target(to).convert()

    def wait(self, period: int) -> None:
        """Sleep for `period` milliseconds."""
        self.timer.wait(period)

    def calculate(self, *arguments: Any) -> int | float:
        return self.calculator.calculate(*arguments)

    def format_number(self, number: float) -> str:
        return self.number_formatter.format(number)

    def round_number(self, number: float, decimals: int = 0) -> str:
        return self.number_formatter.round(number, decimals)

    def ollama(self) -> OllamaClient:
        return self.ollama_endpoint

    def webhook(self) -> WebhookClient:
        return self.webhook_endpoint
