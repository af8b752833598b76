"""
Data transformation utilities for API request/response handling.
"""

from typing import Dict, Any, List
from datetime import datetime, timezone
import numpy as np

from models.population import PopulationStats


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class DataTransformer:
    """Utility class for transforming data between different formats."""

    @staticmethod
    def serialize_numpy(obj: Any) -> Any:
        """
        Convert numpy types to Python native types for JSON serialization.

        Args:
            obj: Object that may contain numpy types

        Returns:
            Object with numpy types converted to Python types
        """
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, dict):
            return {key: DataTransformer.serialize_numpy(value) for key, value in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [DataTransformer.serialize_numpy(item) for item in obj]
        else:
            return obj

    @staticmethod
    def format_simulation_data(raw_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Format raw simulation data for API response.

        Args:
            raw_data: Raw simulation data from the service

        Returns:
            Formatted data suitable for API response
        """
        formatted = {}

        for key, value in raw_data.items():
            if isinstance(value, datetime):
                formatted[key] = value.isoformat()
            elif isinstance(value, PopulationStats):
                formatted[key] = value.to_dict()
            elif isinstance(value, list) and value and isinstance(value[0], PopulationStats):
                formatted[key] = [stats.to_dict() for stats in value]
            else:
                formatted[key] = DataTransformer.serialize_numpy(value)

        return formatted

    @staticmethod
    def stats_history_summary(history: List[PopulationStats]) -> Dict[str, List[Any]]:
        """
        Pivot a list of stats snapshots into per-metric series.

        Args:
            history: Snapshots in generation order

        Returns:
            Dictionary of metric name to list of values
        """
        return {
            "generations": [s.generation for s in history],
            "total_count": [s.total_count for s in history],
            "resistant_count": [s.resistant_count for s in history],
            "mutant_count": [s.mutant_count for s in history],
            "average_fitness": [s.average_fitness for s in history],
            "diversity": [s.diversity for s in history],
        }


class ResponseBuilder:
    """Helper class for building consistent API responses."""

    @staticmethod
    def success(data: Any, message: str = "Success") -> Dict[str, Any]:
        """Build a success response."""
        return {
            "success": True,
            "message": message,
            "data": DataTransformer.serialize_numpy(data),
            "timestamp": _utc_timestamp()
        }

    @staticmethod
    def error(message: str, error_code: str = "UNKNOWN_ERROR", details: Any = None) -> Dict[str, Any]:
        """Build an error response."""
        response = {
            "success": False,
            "error": {
                "message": message,
                "code": error_code,
                "timestamp": _utc_timestamp()
            }
        }

        if details:
            response["error"]["details"] = DataTransformer.serialize_numpy(details)

        return response
