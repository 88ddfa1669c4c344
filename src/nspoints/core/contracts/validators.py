"""
JSON Schema Contract Validators

Граница между in-memory моделями токена и их JSON-представлением.
NSPoints(validate_contracts=True) прогоняет через эти валидаторы каждое
фиксируемое событие и каждый снапшот; в остальных случаях валидаторы
используются внешними потребителями журнала (аудит, индексаторы).

Схемы (nspoints/core/contracts/schema/):
- token_event.json: события токена (Transfer, Approval, allowlist, ownership, Initialized)
- token_snapshot.json: снапшот состояния экземпляра
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from nspoints.core.domain.events import TokenEvent

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-validation.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")
            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Принимает либо готовый dict, либо pydantic модель: модель сериализуется
    в JSON-режиме (by_alias) перед проверкой.
    """

    schema_name: str = ""

    def __init__(self):
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def to_data(self, payload: Any) -> Dict[str, Any]:
        if isinstance(payload, BaseModel):
            return payload.model_dump(mode="json", by_alias=True)
        return payload

    def validate(self, payload: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(self.to_data(payload))

    def is_valid(self, payload: Any) -> bool:
        return self.validator.is_valid(self.to_data(payload))

    def error_messages(self, payload: Any) -> List[str]:
        """Все нарушения схемы в виде "путь: сообщение"."""
        return [
            f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
            for error in self.validator.iter_errors(self.to_data(payload))
        ]


class TokenEventValidator(ContractValidator):
    """Валидатор для token_event контракта."""

    schema_name = "token_event"

    def to_data(self, payload: Any) -> Dict[str, Any]:
        if isinstance(payload, TokenEvent):
            return payload.to_contract()
        return super().to_data(payload)


class TokenSnapshotValidator(ContractValidator):
    """Валидатор для token_snapshot контракта."""

    schema_name = "token_snapshot"


@lru_cache(maxsize=None)
def event_validator() -> TokenEventValidator:
    return TokenEventValidator()


@lru_cache(maxsize=None)
def snapshot_validator() -> TokenSnapshotValidator:
    return TokenSnapshotValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_token_event(data: Any) -> None:
    """
    Валидация события (TokenEvent или результат to_contract()).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    event_validator().validate(data)


def validate_token_events(events: Iterable[TokenEvent]) -> None:
    """Валидация пакета событий одного вызова."""
    validator = event_validator()
    for event in events:
        validator.validate(event)


def validate_token_snapshot(data: Any) -> None:
    """
    Валидация снапшота (TokenSnapshot или model_dump(mode="json")).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    snapshot_validator().validate(data)
