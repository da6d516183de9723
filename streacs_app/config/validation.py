"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_year(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    SOURCE_FIELDS = ("market_structure", "regulators", "ipp", "vre", "world_map")

    @staticmethod
    def validate_source_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate data source locations."""
        errors = []

        for field in ConfigValidator.SOURCE_FIELDS:
            if field in params:
                value = params[field]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a non-empty path or URL",
                        value=value
                    ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_timeline_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate timeline parameters."""
        errors = []

        for field in ("start_year", "end_year"):
            if field in params and not _is_year(params[field]):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a positive integer year",
                    value=params[field]
                ))

        start, end = params.get("start_year"), params.get("end_year")
        if _is_year(start) and _is_year(end) and start > end:
            errors.append(ValidationError(
                field="end_year",
                message="Must not be earlier than start_year",
                value=end
            ))

        if "play_speed_ms" in params:
            value = params["play_speed_ms"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="play_speed_ms",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_scenario_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate VRE scenario parameters."""
        errors = []

        if "country" in params:
            value = params["country"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="country",
                    message="Must be a non-empty country name",
                    value=value
                ))

        for field in ("current_year", "checkpoint_year", "horizon_year"):
            if field in params and not _is_year(params[field]):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a positive integer year",
                    value=params[field]
                ))

        # Shares are percentages
        for field in (
            "current_value",
            "conservative_checkpoint",
            "conservative_horizon",
            "optimistic_checkpoint",
            "optimistic_horizon",
        ):
            if field in params:
                value = params[field]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        current = params.get("current_year")
        checkpoint = params.get("checkpoint_year")
        horizon = params.get("horizon_year")
        if _is_year(current) and _is_year(checkpoint) and checkpoint < current:
            errors.append(ValidationError(
                field="checkpoint_year",
                message="Must not be earlier than current_year",
                value=checkpoint
            ))
        if _is_year(checkpoint) and _is_year(horizon) and horizon < checkpoint:
            errors.append(ValidationError(
                field="horizon_year",
                message="Must not be earlier than checkpoint_year",
                value=horizon
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "sources" in config:
            errors.extend(ConfigValidator.validate_source_params(config["sources"]))

        if "timeline" in config:
            errors.extend(ConfigValidator.validate_timeline_params(config["timeline"]))

        if "scenarios" in config:
            errors.extend(ConfigValidator.validate_scenario_params(config["scenarios"]))

        return errors
