"""DynamoDB persistence for weather records."""

from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError, NoRegionError

from weather_lambda.config import Settings, get_settings
from weather_lambda.exceptions import ConfigurationException, ErrorCode, PersistenceException
from weather_lambda.logging_config import get_logger, log_with_context
from weather_lambda.models.weather import WeatherRecord

logger = get_logger(__name__)


def record_to_item(record: WeatherRecord) -> dict[str, Any]:
    """Convert a record to a DynamoDB item.

    The resource API rejects floats, so numbers go through Decimal.
    """
    item: dict[str, Any] = {
        "City": record.city,
        "Temperature": Decimal(str(record.temperature)),
        "Humidity": record.humidity,
    }
    if record.location_name:
        item["LocationName"] = record.location_name
    return item


class PersistenceStore:
    """Upserts one row per city into a DynamoDB table.

    ``put_item`` replaces any previous row for the same ``City`` key
    (last write wins). The table handle is created on first save so a
    missing configuration fails the request, not the cold start.
    """

    def __init__(self, settings: Settings | None = None, table: Any = None):
        self.settings = settings or get_settings()
        self._table = table

    def _get_table(self) -> Any:
        if self._table is not None:
            return self._table

        table_name = self.settings.db_table_name
        if not table_name:
            raise ConfigurationException(
                "DynamoDB table name is not configured",
                code=ErrorCode.CONFIG_MISSING,
                details={"setting": "DB_TABLE_NAME"},
            )

        try:
            resource = boto3.resource("dynamodb", region_name=self.settings.aws_region or None)
        except NoRegionError as e:
            raise ConfigurationException(
                "AWS region is not configured",
                code=ErrorCode.CONFIG_MISSING,
                details={"setting": "AWS_REGION"},
            ) from e
        except BotoCoreError as e:
            raise ConfigurationException(
                f"AWS session could not be created: {str(e)}",
                details={"error_type": type(e).__name__},
            ) from e

        self._table = resource.Table(table_name)
        return self._table

    def save(self, record: WeatherRecord) -> None:
        """Upsert ``record`` keyed by its city.

        Args:
            record: Record to persist

        Raises:
            ConfigurationException: If table name or region is missing
            PersistenceException: If DynamoDB rejects the write
        """
        table = self._get_table()

        try:
            table.put_item(Item=record_to_item(record))
        except ClientError as e:
            error = e.response.get("Error", {})
            raise PersistenceException(
                f"Failed to save weather data: {error.get('Message', str(e))}",
                details={"city": record.city, "aws_error_code": error.get("Code", "Unknown")},
            ) from e
        except BotoCoreError as e:
            raise PersistenceException(
                f"Failed to save weather data: {str(e)}",
                details={"city": record.city, "error_type": type(e).__name__},
            ) from e
        except (TypeError, ArithmeticError) as e:
            # Item values DynamoDB cannot represent (non-finite or out of range numbers)
            raise PersistenceException(
                f"Failed to save weather data: malformed item ({str(e)})",
                details={"city": record.city, "error_type": type(e).__name__},
            ) from e

        log_with_context(
            logger,
            "info",
            "Successfully saved weather data",
            city=record.city,
            table=self.settings.db_table_name,
            event_type="weather_saved",
        )
