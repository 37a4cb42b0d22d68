"""
JSON Schema Contract Validators

Модуль для валидации JSON отчётов согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- factorization_report.json
- fraction_report.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем (устанавливаются как package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'fraction_report')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class FactorizationReportValidator(ContractValidator):
    """Валидатор для factorization_report контракта."""

    def __init__(self):
        super().__init__("factorization_report")


class FractionReportValidator(ContractValidator):
    """Валидатор для fraction_report контракта."""

    def __init__(self):
        super().__init__("fraction_report")


# =============================================================================
# REPORT VALIDATION (--json)
# =============================================================================


# Схемы неизменны: один Draft202012Validator на контракт
_FACTORIZATION_REPORT_VALIDATOR = FactorizationReportValidator()
_FRACTION_REPORT_VALIDATOR = FractionReportValidator()


def validate_factorization_report(data: Dict[str, Any]) -> None:
    """
    Валидация factorization_report данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _FACTORIZATION_REPORT_VALIDATOR.validate(data)


def validate_fraction_report(data: Dict[str, Any]) -> None:
    """
    Валидация fraction_report данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _FRACTION_REPORT_VALIDATOR.validate(data)


__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "FactorizationReportValidator",
    "FractionReportValidator",
    "ValidationError",
    "validate_factorization_report",
    "validate_fraction_report",
]
